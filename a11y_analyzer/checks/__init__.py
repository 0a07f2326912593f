"""
Accessibility Checks

Static structural checks over a MarkupTree. Each module registers its
rule on import; the import order below is the default run order.
"""

from .registry import Rule, each_element, get_rules, register, rule_names, run_rule, unregister
from .images import check_image_alt
from .forms import check_form_labels
from .headings import check_heading_order
from .contrast import check_contrast
from .landmarks import check_landmarks

__all__ = [
    "Rule",
    "register",
    "unregister",
    "get_rules",
    "rule_names",
    "run_rule",
    "each_element",
    "check_image_alt",
    "check_form_labels",
    "check_heading_order",
    "check_contrast",
    "check_landmarks",
]
