"""
Heading Hierarchy Check

WCAG 1.3.1: headings should start at h1 and descend one level at a
time so screen reader users can navigate the outline.

Correctness depends on visiting headings in document order.
"""

from ..locator import locate
from ..models import Finding, Severity
from ..tree import MarkupTree
from .registry import register

RULE = "heading-order"

HEADINGS = ("h1", "h2", "h3", "h4", "h5", "h6")


@register(RULE)
def check_heading_order(tree: MarkupTree) -> list[Finding]:
    """
    Walk h1-h6 in document order and flag hierarchy breaks.

    - first heading not h1 -> Warning "First heading is not h1"
    - level jumps by more than one -> Warning "Skipped heading level"

    Going back up (h3 -> h1) is fine. The previous level is updated
    after every heading, whether or not it was flagged.

    Example:
        h2, h1, h4 -> "First heading is not h1" on the h2,
                      "Skipped heading level" (h1 to h4) on the h4
    """
    findings = []
    previous_level = 0
    first = True

    for heading in tree.select_by_tag(*HEADINGS):
        try:
            level = int(heading.tag[1])
        except (IndexError, ValueError):
            continue

        if first and level != 1:
            findings.append(Finding(
                severity=Severity.WARNING,
                title="First heading is not h1",
                description="The first heading on a page should usually be h1.",
                locator=locate(heading),
                recommendation="Change this heading to an h1 if it represents the main title of the page."
            ))

        if previous_level > 0 and level > previous_level + 1:
            findings.append(Finding(
                severity=Severity.WARNING,
                title="Skipped heading level",
                description=(
                    f"Jumped from h{previous_level} to h{level}, "
                    "skipping at least one level."
                ),
                locator=locate(heading),
                recommendation="Maintain a proper heading hierarchy without skipping levels."
            ))

        previous_level = level
        first = False

    return findings
