"""
Image Alternative Text Check

WCAG 1.1.1: every <img> needs an alt attribute.
A missing alt is an error; an empty alt is only a warning because
alt="" is the accepted way to mark an image as decorative.
"""

from ..locator import locate
from ..models import Finding, Severity
from ..tree import Element, MarkupTree
from .registry import each_element, register

RULE = "image-alt"


def _check_image(img: Element) -> list[Finding]:
    alt = img.attribute("alt")

    if alt is None:
        return [Finding(
            severity=Severity.ERROR,
            title="Image missing alt text",
            description="Images must have alt text to be accessible to screen reader users.",
            locator=locate(img),
            recommendation="Add descriptive alt text to the image that conveys its purpose or content."
        )]

    if not alt.strip():
        return [Finding(
            severity=Severity.WARNING,
            title="Image has empty alt text",
            description="Empty alt text should only be used for decorative images.",
            locator=locate(img),
            recommendation="Add descriptive alt text or confirm the image is purely decorative."
        )]

    return []


@register(RULE)
def check_image_alt(tree: MarkupTree) -> list[Finding]:
    """
    Check every <img> for alternative text.

    Returns:
        One Error per image without alt, one Warning per image whose
        alt is empty or whitespace, in document order
    """
    return list(each_element(RULE, tree.select_by_tag("img"), _check_image))
