from prometheus_client import Counter, Histogram
# Prometheus metrics definitions

# ROI engine latency, observed around calculate_roi_scenarios
_roi_latency_buckets = (
    0.001,
    0.005,
    0.01,
    0.05,
    0.1,
)

roi_calc_seconds = Histogram(
    "roi_calc_seconds", "ROI calculation latency", buckets=_roi_latency_buckets
)

# Calculations by outcome: ok | invalid
roi_calc_total = Counter(
    "roi_calc_total", "Total ROI calculations", ["status"]
)

# Advisory warnings returned to callers
roi_warning_total = Counter(
    "roi_warning_total", "Total ROI reasonableness warnings"
)

__all__ = [
    "roi_calc_seconds",
    "roi_calc_total",
    "roi_warning_total",
]
