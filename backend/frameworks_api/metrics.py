from prometheus_client import CONTENT_TYPE_LATEST, Counter, generate_latest

REQUESTS_TOTAL = Counter(
    "requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)
SEED_RUNS_TOTAL = Counter(
    "framework_seed_runs_total",
    "Framework seeding runs by outcome",
    ["outcome"],
)


__all__ = [
    "CONTENT_TYPE_LATEST",
    "REQUESTS_TOTAL",
    "SEED_RUNS_TOTAL",
    "generate_latest",
]
