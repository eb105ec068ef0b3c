from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///./frameworks.db"

# Every Postgres flavour is served through psycopg2, the only driver we ship.
_POSTGRES_SCHEMES = frozenset(
    {
        "postgres",
        "postgresql",
        "postgresql+psycopg",
        "postgresql+psycopg2",
        "postgresql+asyncpg",
        "postgresql+pg8000",
    }
)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name)
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        value = default
    return max(minimum, value)


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        return value[1:-1].strip()
    return value


def normalize_database_url(raw: str | None) -> str:
    url = _strip_quotes((raw or "").strip()) or DEFAULT_DATABASE_URL
    scheme, sep, rest = url.partition("://")
    if not sep or scheme.lower() not in _POSTGRES_SCHEMES:
        return url

    url = f"postgresql+psycopg2://{rest}"
    if "sslmode=" not in url:
        url += ("&" if "?" in url else "?") + "sslmode=require"
    return url


@dataclass(frozen=True)
class Settings:
    database_url: str
    db_pool_size: int
    db_max_overflow: int
    db_pool_timeout: int
    db_pool_recycle: int
    cors_origins: list[str]
    debug: bool
    enable_prometheus_metrics: bool
    log_level: str

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS") or os.getenv("FRONTEND_URL") or "http://localhost:3000"
        return cls(
            database_url=normalize_database_url(os.getenv("DATABASE_URL")),
            db_pool_size=_env_int("DB_POOL_SIZE", 5, minimum=1),
            db_max_overflow=_env_int("DB_MAX_OVERFLOW", 10),
            db_pool_timeout=_env_int("DB_POOL_TIMEOUT", 30, minimum=1),
            db_pool_recycle=_env_int("DB_POOL_RECYCLE", 1800, minimum=60),
            cors_origins=[item.strip() for item in origins.split(",") if item.strip()],
            debug=_env_bool("DEBUG", False),
            enable_prometheus_metrics=_env_bool("ENABLE_PROMETHEUS_METRICS", True),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        )

    @property
    def db_backend(self) -> str:
        return "sqlite" if self.database_url.startswith("sqlite") else "postgres"


settings = Settings.from_env()
