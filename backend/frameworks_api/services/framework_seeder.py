from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Union

from ..metrics import SEED_RUNS_TOTAL
from ..seed_data import DEFAULT_FRAMEWORKS, FRAMEWORK_SEED_VERSION
from ..store import FrameworkStore

logger = logging.getLogger("frameworks.seed")

ALREADY_SEEDED_MESSAGE = "Frameworks already exist"
SEEDED_MESSAGE = "Frameworks successfully seeded!"
SEED_FAILED_MESSAGE = "Failed to seed frameworks"
UNKNOWN_ERROR = "Unknown error"


@dataclass(frozen=True)
class SeedSuccess:
    message: str
    count: int
    inserted: bool


@dataclass(frozen=True)
class SeedFailure:
    error: str
    details: str


SeedOutcome = Union[SeedSuccess, SeedFailure]


def describe_error(exc: BaseException) -> str:
    message = str(exc).strip()
    return message or UNKNOWN_ERROR


class FrameworkSeeder:
    """Populate an empty framework store with the fixed reference set.

    The check is by row count only: any existing record, whether or not it is
    one of the defaults, turns ``seed`` into a read-only call.
    """

    def __init__(self, store: FrameworkStore) -> None:
        self._store = store

    def seed(self) -> SeedOutcome:
        try:
            existing_count = self._store.count()
            if existing_count > 0:
                SEED_RUNS_TOTAL.labels(outcome="skipped").inc()
                logger.info(
                    "Frameworks already present, skipping seed",
                    extra={"event": "framework_seed_skipped", "count": existing_count},
                )
                return SeedSuccess(message=ALREADY_SEEDED_MESSAGE, count=existing_count, inserted=False)

            inserted = self._store.create_many(DEFAULT_FRAMEWORKS)
        except Exception as exc:
            SEED_RUNS_TOTAL.labels(outcome="failed").inc()
            logger.exception(
                "Error seeding frameworks",
                extra={"event": "framework_seed_failed", "reason": describe_error(exc)},
            )
            return SeedFailure(error=SEED_FAILED_MESSAGE, details=describe_error(exc))

        SEED_RUNS_TOTAL.labels(outcome="seeded").inc()
        logger.info(
            "Frameworks seeded",
            extra={
                "event": "framework_seed_completed",
                "count": inserted,
                "seed_version": FRAMEWORK_SEED_VERSION,
            },
        )
        return SeedSuccess(message=SEEDED_MESSAGE, count=inserted, inserted=True)
