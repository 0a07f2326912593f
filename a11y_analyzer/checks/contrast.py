"""
Color Contrast Notice

Contrast (WCAG 1.4.3) needs computed styles and rendering, which
this analyzer does not do. The rule records that gap in every report
instead of inspecting the page.
"""

from ..models import Finding, Severity
from ..tree import MarkupTree
from .registry import register

RULE = "color-contrast"


@register(RULE)
def check_contrast(tree: MarkupTree) -> list[Finding]:
    """Always emit one notice; the tree is not inspected"""
    return [Finding(
        severity=Severity.NOTICE,
        title="Color contrast not checked",
        description=(
            "This automated test cannot check color contrast, "
            "which is important for users with low vision."
        ),
        recommendation="Use a tool like WebAIM's Contrast Checker to verify sufficient contrast ratios."
    )]
