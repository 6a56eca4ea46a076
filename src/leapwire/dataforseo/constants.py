# leapwire/dataforseo/constants.py
"""Constants for the DataForSEO v3 API."""

DATAFORSEO_API_BASE_URL = "https://api.dataforseo.com/v3"
DEFAULT_USER_AGENT = "leapwire-dataforseo/0.1.0"

# Envelope and task status codes
STATUS_OK = 20000
STATUS_TASK_CREATED = 20100  # async task accepted by task_post endpoints
STATUS_NOT_FOUND = 40400  # on summary endpoints: task still being processed

DEFAULT_MAX_CONCURRENCY = 5
