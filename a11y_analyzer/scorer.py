"""
Accessibility Analyzer Orchestrator

Coordinates parsing, rule evaluation and aggregation into a scored
Report. Rules share nothing, so they can run one after another or
concurrently on worker threads; either way the findings are
concatenated in registry order, which keeps reports reproducible.
"""

import asyncio
import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Optional, Union

from .checks import get_rules, run_rule
from .fetch import fetch_markup
from .models import Config, Finding, Report, Severity, compliance_score
from .tree import MarkupTree, parse

logger = logging.getLogger(__name__)

__all__ = ["A11yAnalyzer", "aggregate", "analyze", "compliance_score"]


def aggregate(
    findings: Iterable[Finding],
    source: str,
    generated_at: Optional[datetime] = None
) -> Report:
    """
    Partition findings into severity buckets and build a Report.

    Stable partition: relative order inside each bucket is the order
    findings arrive in. Nothing is sorted or deduplicated.

    Args:
        findings: Flat findings from all rules
        source: URL or document name, used as report label
        generated_at: Timestamp override (defaults to now, UTC)

    Returns:
        Report with errors, warnings and notices buckets
    """
    buckets: dict[Severity, list[Finding]] = {severity: [] for severity in Severity}
    for finding in findings:
        buckets[finding.severity].append(finding)

    fields = {severity.bucket: tuple(items) for severity, items in buckets.items()}
    if generated_at is not None:
        fields["generated_at"] = generated_at

    return Report(source=source, **fields)


class A11yAnalyzer:
    """
    Runs the accessibility rule set over markup and scores the result.

    Example:
        analyzer = A11yAnalyzer(load_config())
        report = analyzer.analyze(html, source="index.html")
        print(f"Score: {report.score}/100")

        # Rules on worker threads
        report = asyncio.run(analyzer.analyze_async(html, "index.html"))
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize analyzer.

        Args:
            config: Rule selection and retrieval settings

        Raises:
            UnknownRuleError: If config.rules names an unregistered rule
        """
        self.config = config or Config()
        self.rules = get_rules(self.config.rules)

    def analyze(self, markup: Union[str, bytes], source: str) -> Report:
        """
        Analyze markup with every selected rule, sequentially.

        Args:
            markup: HTML text
            source: Label for the report (URL or file name)

        Returns:
            Complete Report

        Raises:
            MalformedMarkupError: If markup cannot be tokenized
        """
        tree = parse(markup)
        findings = []
        for name, rule in self.rules.items():
            findings.extend(run_rule(name, rule, tree))

        return self._report(findings, source, tree)

    async def analyze_async(self, markup: Union[str, bytes], source: str) -> Report:
        """
        Analyze markup, running the rules concurrently on threads.

        Produces the same Report as analyze() (timestamp aside).
        """
        tree = parse(markup)
        results = await asyncio.gather(*(
            asyncio.to_thread(run_rule, name, rule, tree)
            for name, rule in self.rules.items()
        ))

        # gather preserves argument order, so findings stay in registry order
        findings = [finding for result in results for finding in result]
        return self._report(findings, source, tree)

    def analyze_url(self, url: str) -> Report:
        """
        Fetch a page and analyze it.

        Raises:
            RetrievalError: If the page could not be fetched
            MalformedMarkupError: If the body cannot be tokenized
        """
        markup = fetch_markup(url, self.config)
        if self.config.parallel_rules:
            return asyncio.run(self.analyze_async(markup, url))
        return self.analyze(markup, url)

    def _report(self, findings: list[Finding], source: str, tree: MarkupTree) -> Report:
        report = aggregate(findings, source)
        logger.info(
            "Analyzed %s: %d elements, %d errors, %d warnings, %d notices, score %d",
            source, len(tree), len(report.errors), len(report.warnings),
            len(report.notices), report.score
        )
        return report


def analyze(markup: Union[str, bytes], source: str = "document") -> Report:
    """Analyze markup with the default rule set"""
    return A11yAnalyzer().analyze(markup, source)
