"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from protein_calculator.config import Settings
from protein_calculator.containers import AppContainer, build_container
from protein_calculator.domain.calculations import (
    CalculationMethod,
    CalculationRecord,
    SourceAllocation,
)
from protein_calculator.domain.sources import ProteinCategory, ProteinSource
from protein_calculator.services.catalog import ProteinSourceCatalog
from protein_calculator.services.history import HistoryBackend, HistoryStore

WHEY = ProteinSource.named(
    "Whey Protein Isolate", ProteinCategory.SUPPLEMENT, 1.25, 1.0
)
EGG = ProteinSource.named("Egg (Whole)", ProteinCategory.DAIRY, 1.13, 1.0)
SOY = ProteinSource.named("Soy Protein Isolate", ProteinCategory.SUPPLEMENT, 0.90, 1.0)
TOFU = ProteinSource.named("Tofu (Firm)", ProteinCategory.PLANT, 0.87, 0.95)
PDCAAS_ONLY = ProteinSource.named("Mystery Legume", ProteinCategory.PLANT, None, 0.6)
UNSCORED = ProteinSource.named("BCAA Powder", ProteinCategory.SUPPLEMENT)


@dataclass
class InMemoryHistoryBackend(HistoryBackend):
    """In-memory key/value backend for tests."""

    values: dict[str, str] = field(default_factory=dict)

    def read(self, key: str) -> str | None:
        return self.values.get(key)

    def write(self, key: str, value: str) -> None:
        self.values[key] = value

    def remove(self, key: str) -> None:
        self.values.pop(key, None)


@dataclass
class FailingHistoryBackend(HistoryBackend):
    """Backend whose every operation fails, like disabled browser storage."""

    def read(self, key: str) -> str | None:
        raise OSError("storage disabled")

    def write(self, key: str, value: str) -> None:
        raise OSError("storage disabled")

    def remove(self, key: str) -> None:
        raise OSError("storage disabled")


def make_record(
    record_id: str,
    timestamp: datetime,
    source: ProteinSource = WHEY,
    stated_protein: float = 20.0,
    digestible_protein: float = 25.0,
) -> CalculationRecord:
    """Build a history record with sensible defaults."""
    return CalculationRecord(
        id=record_id,
        stated_protein=stated_protein,
        sources=(SourceAllocation(source),),
        digestible_protein=digestible_protein,
        digestibility_percentage=digestible_protein / stated_protein * 100,
        calculation_method=CalculationMethod.DIAAS,
        timestamp=timestamp,
    )


def timestamps(count: int, start: datetime | None = None) -> list[datetime]:
    """Return ``count`` increasing timestamps one minute apart."""
    origin = start or datetime(2024, 1, 1, tzinfo=UTC)
    return [origin + timedelta(minutes=index) for index in range(count)]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(storage_backend="file", history_dir=str(tmp_path / "history"))


@pytest.fixture
def catalog() -> ProteinSourceCatalog:
    return ProteinSourceCatalog.from_sources()


@pytest.fixture
def backend() -> InMemoryHistoryBackend:
    return InMemoryHistoryBackend()


@pytest.fixture
def history_store(backend: InMemoryHistoryBackend) -> HistoryStore:
    return HistoryStore(backend=backend)


@pytest.fixture
def container(settings: Settings, backend: InMemoryHistoryBackend) -> AppContainer:
    return build_container(settings, backend=backend)
