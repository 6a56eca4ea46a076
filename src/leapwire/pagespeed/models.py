"""PageSpeed Insights response models and the condensed result.

The raw models only cover the parts of the Lighthouse report that are used;
everything else is accepted and ignored.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MetricCategory = Literal["good", "needs-improvement", "poor"]


# --- Raw API response ---


class AuditDetails(BaseModel):
    type: str | None = None
    model_config = ConfigDict(extra="allow")


class LighthouseAudit(BaseModel):
    id: str | None = None
    title: str = ""
    score: float | None = None
    displayValue: str | None = None
    numericValue: float | None = None
    details: AuditDetails | None = None
    model_config = ConfigDict(extra="allow")


class CategoryScore(BaseModel):
    score: float | None = None  # 0.0 to 1.0
    model_config = ConfigDict(extra="allow")


class LighthouseResult(BaseModel):
    categories: dict[str, CategoryScore] = Field(default_factory=dict)
    audits: dict[str, LighthouseAudit] = Field(default_factory=dict)
    model_config = ConfigDict(extra="allow")


class ApiErrorBody(BaseModel):
    code: int | None = None
    message: str = ""
    model_config = ConfigDict(extra="allow")


class PageSpeedApiResponse(BaseModel):
    lighthouseResult: LighthouseResult | None = None
    error: ApiErrorBody | None = None
    model_config = ConfigDict(extra="allow")


# --- Condensed result ---


class WebVitalMetric(BaseModel):
    """A single Core Web Vital.

    Attributes:
        value: Formatted value, e.g. "1.2s", "0.01" or "120ms"; "N/A" if missing.
        category: "good", "needs-improvement" or "poor".
    """

    value: str
    category: MetricCategory


class PageSpeedResult(BaseModel):
    """Scores, Core Web Vitals and top recommendations for one audited URL.

    Category scores are integers from 0 to 100. ``metrics`` is keyed by
    "LCP", "CLS", "FCP", "TBT" and "SI"; ``load_time`` repeats the LCP value.
    """

    performance: int = 0
    accessibility: int = 0
    best_practices: int = Field(default=0, serialization_alias="bestPractices")
    seo: int = 0
    load_time: str = Field(default="", serialization_alias="loadTime")
    metrics: dict[str, WebVitalMetric] = Field(default_factory=dict)
    recommendations: list[str] = Field(default_factory=list)
    audited_url: str = Field(default="", serialization_alias="auditedUrl")
    audited_at: str = Field(default="", serialization_alias="auditedAt")
