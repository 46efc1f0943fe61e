# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Prometheus metrics shared by the API and the website."""
from prometheus_client import Counter, Gauge, Histogram

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request latency", ["method", "endpoint"]
)
HTTP_ERRORS = Counter(
    "http_errors_total", "Total HTTP errors", ["method", "endpoint", "status"]
)
DATABASE_UP = Gauge(
    "api_database_up", "1 when the last MongoDB ping succeeded"
)
PAGE_VIEWS = Counter(
    "site_page_views_total", "Total page views", ["page"]
)
LOGIN_ATTEMPTS = Counter(
    "site_login_attempts_total",
    "Member login attempts by outcome",
    ["outcome"],
)
SESSION_CHECKS = Counter(
    "site_session_checks_total",
    "Session restores on page load by outcome",
    ["outcome"],
)
