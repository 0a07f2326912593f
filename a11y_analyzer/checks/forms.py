"""
Form Control Label Check

WCAG 1.3.1 / 4.1.2: input, select and textarea controls need an
accessible name, either from aria-label / aria-labelledby or from a
<label for="..."> pointing at the control's id.
"""

from ..locator import locate
from ..models import Finding, Severity
from ..tree import Element, MarkupTree
from .registry import each_element, register

RULE = "form-label"

FORM_CONTROLS = ("input", "select", "textarea")


@register(RULE)
def check_form_labels(tree: MarkupTree) -> list[Finding]:
    """
    Check that every form control is labelled.

    At most one finding per control:
    - no id, aria-label or aria-labelledby -> "Form control without label"
    - id but no aria name and no matching <label for> ->
      "Form control with ID but no associated label"
    """
    # Empty for="" or id="" never pairs a label with a control
    label_targets = {
        label.attribute("for")
        for label in tree.select_by_tag("label")
        if label.attribute("for")
    }

    def check_control(control: Element) -> list[Finding]:
        control_id = control.attribute("id")
        aria_label = control.attribute("aria-label")
        aria_labelledby = control.attribute("aria-labelledby")

        if not control_id and not aria_label and not aria_labelledby:
            return [Finding(
                severity=Severity.ERROR,
                title="Form control without label",
                description="Form controls must be labeled to be accessible to screen reader users.",
                locator=locate(control),
                recommendation=(
                    "Add a label element with a \"for\" attribute that matches the input's id, "
                    "or use aria-label/aria-labelledby."
                )
            )]

        if control_id and not aria_label and not aria_labelledby and control_id not in label_targets:
            return [Finding(
                severity=Severity.ERROR,
                title="Form control with ID but no associated label",
                description="Form controls with IDs should have associated label elements.",
                locator=locate(control),
                recommendation="Add a label element with a \"for\" attribute that matches the input's id."
            )]

        return []

    return list(each_element(RULE, tree.select_by_tag(*FORM_CONTROLS), check_control))
