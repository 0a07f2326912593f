"""
Landmark Checks

Pages should expose a <main> region and, when they have navigation,
a <nav> region so assistive technology can jump between them.
"""

from ..models import Finding, Severity
from ..tree import MarkupTree
from .registry import register

RULE = "landmarks"


@register(RULE)
def check_landmarks(tree: MarkupTree) -> list[Finding]:
    """Warn on a missing <main>, note a missing <nav>"""
    findings = []

    if not tree.select_by_tag("main"):
        findings.append(Finding(
            severity=Severity.WARNING,
            title="No main landmark",
            description="Pages should have a main landmark to indicate the primary content area.",
            recommendation="Add a <main> element to wrap the main content of the page."
        ))

    if not tree.select_by_tag("nav"):
        findings.append(Finding(
            severity=Severity.NOTICE,
            title="No navigation landmark",
            description="Pages with navigation should use a nav element.",
            recommendation="Add a <nav> element to wrap navigation links."
        ))

    return findings
