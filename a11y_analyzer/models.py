"""
Data Models for the Accessibility Analyzer

Type-safe Pydantic models for findings, reports and configuration.
All result models are frozen: once a rule emits a Finding or the
aggregator builds a Report, nothing downstream can change them.
"""

import math
from datetime import datetime, timezone
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Severity(str, Enum):
    """
    Severity tier of a finding.

    Closed set; every member maps to exactly one report bucket.
    """

    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"

    @property
    def bucket(self) -> str:
        """Report bucket name for this severity"""
        return _BUCKETS[self]


_BUCKETS = {
    Severity.ERROR: "errors",
    Severity.WARNING: "warnings",
    Severity.NOTICE: "notices",
}
assert set(_BUCKETS) == set(Severity)


class Finding(BaseModel):
    """
    One accessibility issue reported by a rule.

    Attributes:
        severity: Error, Warning or Notice
        title: Short name of the issue
        description: Explanation of why it matters
        locator: Best-effort reference to the offending element (optional)
        recommendation: Actionable fix (optional)
    """

    model_config = ConfigDict(frozen=True)

    severity: Severity
    title: str = Field(min_length=1)
    description: str
    locator: Optional[str] = Field(default=None, description="CSS-like selector of the element")
    recommendation: Optional[str] = None

    def __str__(self) -> str:
        where = f" ({self.locator})" if self.locator else ""
        return f"[{self.severity.value}] {self.title}{where}"

    def to_payload(self) -> dict:
        """Wire representation, locator exposed as `selector`"""
        return {
            "title": self.title,
            "description": self.description,
            "selector": self.locator,
            "recommendation": self.recommendation,
        }


def js_round(value: float) -> int:
    """Round half up, the way JavaScript's Math.round does"""
    return math.floor(value + 0.5)


def compliance_score(errors: int, warnings: int, notices: int) -> int:
    """
    Compute the 0-100 compliance score from bucket sizes.

    Notices only enter the denominator. A lone error saturates the
    penalty (500) and clamps the score to 0; this severity bias is
    kept on purpose.

    Example:
        compliance_score(0, 0, 0)  # 100
        compliance_score(1, 0, 0)  # 0
        compliance_score(0, 1, 2)  # 33
    """
    total = errors + warnings + notices
    denominator = max(1, total)
    penalty = (errors * 5 + warnings * 2) / denominator * 100
    return min(100, max(0, js_round(100 - penalty)))


def score_band(score: int) -> Literal["good", "fair", "poor"]:
    """Presentation band for a compliance score"""
    if score >= 90:
        return "good"
    elif score >= 70:
        return "fair"
    else:
        return "poor"


class Report(BaseModel):
    """
    Aggregated result of one analysis run.

    Bucket membership is decided by severity alone, and each bucket
    keeps the order in which rules produced its findings.

    Attributes:
        source: URL or document name that was analyzed
        generated_at: When the report was built (UTC)
        errors: Findings with severity ERROR
        warnings: Findings with severity WARNING
        notices: Findings with severity NOTICE
    """

    model_config = ConfigDict(frozen=True)

    source: str
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    errors: tuple[Finding, ...] = ()
    warnings: tuple[Finding, ...] = ()
    notices: tuple[Finding, ...] = ()

    @field_validator("errors", "warnings", "notices")
    @classmethod
    def check_bucket(cls, findings: tuple[Finding, ...], info) -> tuple[Finding, ...]:
        """Reject findings filed under the wrong bucket"""
        for finding in findings:
            if finding.severity.bucket != info.field_name:
                raise ValueError(
                    f"{finding.severity.value} finding {finding.title!r} "
                    f"cannot be stored in {info.field_name}"
                )
        return findings

    @property
    def total(self) -> int:
        return len(self.errors) + len(self.warnings) + len(self.notices)

    @property
    def counts(self) -> dict[str, int]:
        return {
            "total": self.total,
            "errorCount": len(self.errors),
            "warningCount": len(self.warnings),
            "noticeCount": len(self.notices),
        }

    @property
    def score(self) -> int:
        """Compliance score, recomputed from the bucket sizes"""
        return compliance_score(len(self.errors), len(self.warnings), len(self.notices))

    @property
    def band(self) -> str:
        return score_band(self.score)

    def findings(self, severity: Severity) -> tuple[Finding, ...]:
        """Get the bucket for a severity"""
        return getattr(self, severity.bucket)

    def to_payload(self) -> dict:
        """JSON-serializable mirror of the report"""
        return {
            "url": self.source,
            "timestamp": self.generated_at.isoformat(),
            "score": self.score,
            "issues": self.counts,
            "errors": [f.to_payload() for f in self.errors],
            "warnings": [f.to_payload() for f in self.warnings],
            "notices": [f.to_payload() for f in self.notices],
        }

    def summary(self) -> str:
        """Generate a human-readable summary"""
        summary = f"Score: {self.score}/100 ({self.band})\n"
        summary += (
            f"Issues: {self.total} total "
            f"({len(self.errors)} errors, {len(self.warnings)} warnings, "
            f"{len(self.notices)} notices)\n"
        )

        if self.errors:
            summary += "\nCritical issues:\n"
            for i, finding in enumerate(self.errors[:3], 1):
                summary += f"  {i}. {finding.title}\n"
            if len(self.errors) > 3:
                summary += f"  + {len(self.errors) - 3} more errors\n"

        return summary


class Config(BaseModel):
    """
    Configuration for the analyzer and its retrieval step.

    Loaded from .env file and environment variables (see config.py).

    Attributes:
        user_agent: User-Agent header sent when fetching pages
        timeout: Fetch timeout in seconds
        rules: Rule names to run; empty means every registered rule
        parallel_rules: Evaluate rules concurrently on worker threads
        output: Default CLI output format
    """

    user_agent: str = "Accessibility-Analyzer/1.0"
    timeout: float = Field(default=10.0, gt=0, le=120)
    rules: list[str] = Field(default_factory=list)
    parallel_rules: bool = False
    output: Literal["rich", "json"] = "rich"

    @field_validator("rules", mode="before")
    @classmethod
    def split_rules(cls, v):
        """Accept a comma separated string as well as a list"""
        if v is None:
            return []
        if isinstance(v, str):
            return [name.strip() for name in v.split(",") if name.strip()]
        return v
