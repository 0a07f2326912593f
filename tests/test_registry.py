import logging

import pytest

from a11y_analyzer import A11yAnalyzer, Config, Finding, Severity, parse
from a11y_analyzer.checks import each_element, get_rules, register, rule_names, run_rule, unregister
from a11y_analyzer.errors import RuleRegistrationError, UnknownRuleError


@pytest.fixture
def temp_rule():
    names = []

    def _register(name, rule):
        register(name)(rule)
        names.append(name)
        return rule

    yield _register

    for name in names:
        unregister(name)


def test_default_rules_in_run_order():
    assert rule_names()[:5] == [
        "image-alt",
        "form-label",
        "heading-order",
        "color-contrast",
        "landmarks",
    ]


def test_duplicate_registration_rejected():
    with pytest.raises(RuleRegistrationError):
        register("image-alt")(lambda tree: [])


def test_select_subset_keeps_registration_order():
    rules = get_rules(["landmarks", "image-alt"])
    assert list(rules) == ["image-alt", "landmarks"]


def test_unknown_rule_rejected():
    with pytest.raises(UnknownRuleError) as info:
        get_rules(["image-alt", "no-such-rule"])
    assert info.value.names == ["no-such-rule"]


def test_analyzer_rejects_unknown_rule_in_config():
    with pytest.raises(UnknownRuleError):
        A11yAnalyzer(Config(rules="bogus"))


def test_run_rule_contains_failures(caplog):
    def broken(tree):
        raise RuntimeError("boom")

    with caplog.at_level(logging.WARNING):
        assert run_rule("broken", broken, parse("<p>")) == []
    assert "broken" in caplog.text


def test_broken_rule_does_not_suppress_others(temp_rule):
    def broken(tree):
        raise ValueError("nope")

    temp_rule("test-broken", broken)
    report = A11yAnalyzer(Config(rules=["test-broken", "image-alt"])).analyze("<img>", "t")
    assert [f.title for f in report.errors] == ["Image missing alt text"]


def test_each_element_skips_pathological_element():
    tree = parse('<img id="a"><img id="bad"><img id="c">')

    def check(el):
        if el.attribute("id") == "bad":
            raise KeyError("unexpected shape")
        return [Finding(severity=Severity.ERROR, title="hit", description="", locator=el.attribute("id"))]

    findings = list(each_element("test", tree.select_by_tag("img"), check))
    assert [f.locator for f in findings] == ["a", "c"]


def test_registered_rule_runs_with_defaults(temp_rule):
    def buttons(tree):
        return [
            Finding(severity=Severity.NOTICE, title="Button", description="")
            for _ in tree.select_by_tag("button")
        ]

    temp_rule("test-buttons", buttons)
    report = A11yAnalyzer().analyze("<button></button><button></button>", "t")
    assert [f.title for f in report.notices][-2:] == ["Button", "Button"]
