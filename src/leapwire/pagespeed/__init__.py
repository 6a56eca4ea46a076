"""Google PageSpeed Insights client."""

from .client import PageSpeedClient
from .config import PageSpeedSettings, get_pagespeed_settings
from .models import PageSpeedResult, WebVitalMetric

__all__ = [
    "PageSpeedClient",
    "PageSpeedResult",
    "PageSpeedSettings",
    "WebVitalMetric",
    "get_pagespeed_settings",
]
