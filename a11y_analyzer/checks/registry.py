"""
Rule Registry

Rules are plain functions `(MarkupTree) -> list[Finding]`, registered
by name with the @register decorator. Registration is explicit: the
checks package imports each rule module, nothing is discovered at
runtime. Insertion order is the default run order.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Optional

from ..errors import RuleRegistrationError, UnknownRuleError
from ..models import Finding
from ..tree import Element, MarkupTree

logger = logging.getLogger(__name__)

Rule = Callable[[MarkupTree], list[Finding]]

_RULES: dict[str, Rule] = {}


def register(name: str) -> Callable[[Rule], Rule]:
    """
    Decorator registering a rule under a unique name.

    Example:
        @register("image-alt")
        def check_image_alt(tree: MarkupTree) -> list[Finding]:
            ...

    Raises:
        RuleRegistrationError: If the name is already taken
    """
    def decorator(rule: Rule) -> Rule:
        if name in _RULES:
            raise RuleRegistrationError(f"Rule {name!r} is already registered")
        _RULES[name] = rule
        return rule

    return decorator


def unregister(name: str) -> None:
    """Remove a rule; unknown names are ignored"""
    _RULES.pop(name, None)


def get_rules(names: Optional[Sequence[str]] = None) -> dict[str, Rule]:
    """
    Get registered rules in registration order.

    Args:
        names: Optional subset of rule names. None or empty selects all.

    Raises:
        UnknownRuleError: If any requested name is not registered
    """
    if not names:
        return dict(_RULES)

    unknown = [name for name in names if name not in _RULES]
    if unknown:
        raise UnknownRuleError(unknown)

    # Keep registration order regardless of how names were listed
    wanted = set(names)
    return {name: rule for name, rule in _RULES.items() if name in wanted}


def rule_names() -> list[str]:
    return list(_RULES)


def run_rule(name: str, rule: Rule, tree: MarkupTree) -> list[Finding]:
    """
    Run one rule, containing any failure to that rule.

    A rule that raises contributes no findings; the other rules
    still run.
    """
    try:
        return list(rule(tree))
    except Exception:
        logger.warning("Rule %s failed and was skipped", name, exc_info=True)
        return []


def each_element(
    rule_name: str,
    elements: Iterable[Element],
    check: Callable[[Element], Iterable[Finding]]
) -> Iterator[Finding]:
    """
    Apply a per-element check, skipping elements that make it raise.

    Findings are yielded in the order of `elements`, which callers
    pass in document order.
    """
    for element in elements:
        try:
            found = list(check(element))
        except Exception as e:
            logger.debug("%s: skipped %r (%s)", rule_name, element, e)
            continue
        yield from found
