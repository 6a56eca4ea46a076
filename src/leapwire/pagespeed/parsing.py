"""Condenses a Lighthouse report into a ``PageSpeedResult``."""

import math
from datetime import UTC, datetime
from typing import NamedTuple

from .models import LighthouseAudit, LighthouseResult, PageSpeedResult, WebVitalMetric

MAX_RECOMMENDATIONS = 5


class Threshold(NamedTuple):
    good: float
    needs_improvement: float


# LCP, FCP and SI in seconds; TBT in milliseconds; CLS unitless
THRESHOLDS: dict[str, Threshold] = {
    "largest-contentful-paint": Threshold(2.5, 4.0),
    "cumulative-layout-shift": Threshold(0.1, 0.25),
    "first-contentful-paint": Threshold(1.8, 3.0),
    "total-blocking-time": Threshold(200, 600),
    "speed-index": Threshold(3.4, 5.8),
}

# metric key -> (audit id, unit, millisecond divisor)
WEB_VITALS: dict[str, tuple[str, str, float]] = {
    "LCP": ("largest-contentful-paint", "s", 1000),
    "CLS": ("cumulative-layout-shift", "", 0),
    "FCP": ("first-contentful-paint", "s", 1000),
    "TBT": ("total-blocking-time", "ms", 0),
    "SI": ("speed-index", "s", 1000),
}


def category_score(lighthouse: LighthouseResult, key: str) -> int:
    """Returns a category score scaled to 0-100, or 0 if it is missing."""
    category = lighthouse.categories.get(key)
    if category is None or category.score is None:
        return 0
    return math.floor(category.score * 100 + 0.5)


def categorize(audit_id: str, raw_value: float, ms_divisor: float) -> str:
    threshold = THRESHOLDS.get(audit_id)
    if threshold is None:
        return "poor"
    compare_value = raw_value
    if ms_divisor > 0 and audit_id != "total-blocking-time":
        compare_value = raw_value / ms_divisor
    if compare_value <= threshold.good:
        return "good"
    if compare_value <= threshold.needs_improvement:
        return "needs-improvement"
    return "poor"


def parse_metric(
    audits: dict[str, LighthouseAudit], audit_id: str, unit: str, ms_divisor: float
) -> WebVitalMetric:
    """Formats and categorizes one Core Web Vital.

    Lighthouse reports times in milliseconds. Values above ``ms_divisor`` are
    shown in seconds; a missing audit yields "N/A" / "poor".
    """
    audit = audits.get(audit_id)
    if audit is None or audit.numericValue is None:
        return WebVitalMetric(value="N/A", category="poor")

    raw_value = audit.numericValue
    display_value = raw_value
    if ms_divisor > 0 and raw_value > ms_divisor:
        display_value = raw_value / ms_divisor

    if unit == "s":
        formatted = f"{display_value:.1f}s"
    elif unit == "ms":
        formatted = f"{raw_value:.0f}ms"
    else:
        formatted = f"{display_value:.2f}"

    return WebVitalMetric(
        value=formatted, category=categorize(audit_id, raw_value, ms_divisor)
    )


def extract_recommendations(
    audits: dict[str, LighthouseAudit], limit: int = MAX_RECOMMENDATIONS
) -> list[str]:
    """Titles of the worst-scoring "opportunity" audits, worst first."""
    opportunities = [
        audit
        for audit in audits.values()
        if audit.details is not None
        and audit.details.type == "opportunity"
        and audit.score is not None
        and audit.score < 1
        and audit.displayValue
    ]
    opportunities.sort(key=lambda audit: (audit.score, audit.title))
    return [audit.title for audit in opportunities[:limit]]


def parse_result(lighthouse: LighthouseResult, audited_url: str) -> PageSpeedResult:
    metrics = {
        key: parse_metric(lighthouse.audits, audit_id, unit, divisor)
        for key, (audit_id, unit, divisor) in WEB_VITALS.items()
    }
    return PageSpeedResult(
        performance=category_score(lighthouse, "performance"),
        accessibility=category_score(lighthouse, "accessibility"),
        best_practices=category_score(lighthouse, "best-practices"),
        seo=category_score(lighthouse, "seo"),
        load_time=metrics["LCP"].value,
        metrics=metrics,
        recommendations=extract_recommendations(lighthouse.audits),
        audited_url=audited_url,
        audited_at=datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ"),
    )
