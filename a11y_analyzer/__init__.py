"""
A11y Analyzer - Static Accessibility Checks for HTML

Parses a page's markup, runs independent structural accessibility
rules over it and aggregates the findings into a scored report.

Rules shipped:
- image-alt: images without (or with empty) alt text
- form-label: unlabelled form controls
- heading-order: broken heading hierarchy
- color-contrast: notice that contrast is not evaluated
- landmarks: missing <main> / <nav>
"""

from .errors import AnalyzerError, MalformedMarkupError, RetrievalError
from .locator import locate
from .models import Config, Finding, Report, Severity, compliance_score
from .scorer import A11yAnalyzer, aggregate, analyze
from .tree import Element, MarkupTree, parse

__version__ = "0.1.0"
__all__ = [
    "A11yAnalyzer",
    "AnalyzerError",
    "Config",
    "Element",
    "Finding",
    "MalformedMarkupError",
    "MarkupTree",
    "Report",
    "RetrievalError",
    "Severity",
    "aggregate",
    "analyze",
    "compliance_score",
    "locate",
    "parse",
]
