from __future__ import annotations

from typing import Sequence

import pytest
from sqlalchemy.exc import OperationalError

from frameworks_api.seed_data import DEFAULT_FRAMEWORKS, FrameworkSeed
from frameworks_api.services.framework_seeder import (
    ALREADY_SEEDED_MESSAGE,
    SEED_FAILED_MESSAGE,
    SEEDED_MESSAGE,
    UNKNOWN_ERROR,
    FrameworkSeeder,
    SeedFailure,
    SeedSuccess,
)


class InMemoryFrameworkStore:
    def __init__(self, records: Sequence[FrameworkSeed] = ()) -> None:
        self.records: list[FrameworkSeed] = list(records)
        self.create_many_calls = 0

    def count(self) -> int:
        return len(self.records)

    def create_many(self, records: Sequence[FrameworkSeed]) -> int:
        self.create_many_calls += 1
        self.records.extend(records)
        return len(records)


class BrokenCountStore(InMemoryFrameworkStore):
    def __init__(self, exc: Exception) -> None:
        super().__init__()
        self._exc = exc

    def count(self) -> int:
        raise self._exc


class BrokenInsertStore(InMemoryFrameworkStore):
    def create_many(self, records: Sequence[FrameworkSeed]) -> int:
        self.create_many_calls += 1
        raise RuntimeError("insert rejected")


def test_seed_empty_store_inserts_defaults():
    store = InMemoryFrameworkStore()

    outcome = FrameworkSeeder(store).seed()

    assert outcome == SeedSuccess(message=SEEDED_MESSAGE, count=5, inserted=True)
    assert store.create_many_calls == 1
    assert {record.name for record in store.records} == {
        "SOC 2 Type II",
        "ISO 27001",
        "GDPR",
        "HIPAA",
        "PCI DSS",
    }
    assert all(record.visible for record in store.records)


def test_seed_twice_does_not_duplicate():
    store = InMemoryFrameworkStore()
    seeder = FrameworkSeeder(store)

    first = seeder.seed()
    second = seeder.seed()

    assert first.count == 5
    assert second == SeedSuccess(message=ALREADY_SEEDED_MESSAGE, count=5, inserted=False)
    assert store.count() == 5
    assert store.create_many_calls == 1


def test_seed_skips_when_any_record_exists():
    store = InMemoryFrameworkStore([FrameworkSeed(name="NIST CSF", description="Custom", version="2.0")])

    outcome = FrameworkSeeder(store).seed()

    assert outcome == SeedSuccess(message=ALREADY_SEEDED_MESSAGE, count=1, inserted=False)
    assert store.create_many_calls == 0
    assert [record.name for record in store.records] == ["NIST CSF"]


def test_seed_count_failure_is_reported_without_insert():
    store = BrokenCountStore(OperationalError("SELECT count(*)", {}, Exception("database is locked")))

    outcome = FrameworkSeeder(store).seed()

    assert isinstance(outcome, SeedFailure)
    assert outcome.error == SEED_FAILED_MESSAGE
    assert "database is locked" in outcome.details
    assert store.create_many_calls == 0


def test_seed_insert_failure_is_reported():
    store = BrokenInsertStore()

    outcome = FrameworkSeeder(store).seed()

    assert outcome == SeedFailure(error=SEED_FAILED_MESSAGE, details="insert rejected")
    assert store.create_many_calls == 1


def test_seed_failure_without_message_uses_unknown_error():
    outcome = FrameworkSeeder(BrokenCountStore(RuntimeError())).seed()

    assert outcome == SeedFailure(error=SEED_FAILED_MESSAGE, details=UNKNOWN_ERROR)


def test_seed_failure_is_logged(caplog: pytest.LogCaptureFixture):
    with caplog.at_level("ERROR", logger="frameworks.seed"):
        FrameworkSeeder(BrokenCountStore(RuntimeError("connection refused"))).seed()

    assert any(record.getMessage() == "Error seeding frameworks" for record in caplog.records)
    assert any(getattr(record, "reason", None) == "connection refused" for record in caplog.records)


def test_default_framework_versions():
    versions = {framework.name: framework.version for framework in DEFAULT_FRAMEWORKS}
    assert versions == {
        "SOC 2 Type II": "2017",
        "ISO 27001": "2022",
        "GDPR": "2016/679",
        "HIPAA": "1996",
        "PCI DSS": "4.0",
    }


def test_seeded_set_is_fixed():
    store = InMemoryFrameworkStore()

    FrameworkSeeder(store).seed()

    assert store.records == list(DEFAULT_FRAMEWORKS)
    with pytest.raises(TypeError):
        FrameworkSeeder(store, frameworks=())
