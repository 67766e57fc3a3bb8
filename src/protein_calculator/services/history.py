"""Bounded, persisted calculation history."""

import json
import logging
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from enum import Enum
from typing import Protocol

from protein_calculator.domain.calculations import (
    CalculationMethod,
    CalculationRecord,
    SourceAllocation,
)
from protein_calculator.domain.sources import ProteinCategory, ProteinSource

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_KEY = "protein_calculation_history"
DEFAULT_MAX_ITEMS = 100
_PROBE_KEY = "__test__"


class HistoryBackend(Protocol):
    """Key/value text storage holding the serialized history."""

    def read(self, key: str) -> str | None:
        """Return the stored text for a key, if any."""

    def write(self, key: str, value: str) -> None:
        """Store text under a key, replacing any previous value."""

    def remove(self, key: str) -> None:
        """Delete a key; missing keys are ignored."""


class HistoryOutcome(Enum):
    """Result of a history operation."""

    OK = "ok"
    STORAGE_UNAVAILABLE = "storage_unavailable"
    PARSE_ERROR = "parse_error"

    def __bool__(self) -> bool:
        return self is HistoryOutcome.OK


class HistoryFormatError(ValueError):
    """Raised when serialized history does not have the expected shape."""


@dataclass(frozen=True)
class HistoryLoad:
    """Records read from storage together with how the read went."""

    records: list[CalculationRecord] = field(default_factory=list)
    outcome: HistoryOutcome = HistoryOutcome.OK


@dataclass
class HistoryStore:
    """Newest-first calculation history capped at ``max_items`` entries."""

    backend: HistoryBackend
    key: str = DEFAULT_HISTORY_KEY
    max_items: int = DEFAULT_MAX_ITEMS

    def load(self) -> HistoryLoad:
        """Read the history, reporting storage and parse failures."""
        try:
            raw = self.backend.read(self.key)
        except Exception:
            logger.exception("Failed to read calculation history")
            return HistoryLoad(outcome=HistoryOutcome.STORAGE_UNAVAILABLE)
        if not raw:
            return HistoryLoad()
        try:
            records = parse_history(raw)
        except ValueError as exc:
            logger.warning("Stored calculation history is unreadable: %s", exc)
            return HistoryLoad(outcome=HistoryOutcome.PARSE_ERROR)
        return HistoryLoad(records=records)

    def get_all(self) -> list[CalculationRecord]:
        """Return all records, newest first; unreadable storage yields []."""
        return self.load().records

    def get_in_range(self, start: datetime, end: datetime) -> list[CalculationRecord]:
        """Return records whose timestamp lies within [start, end]."""
        start, end = _as_aware(start), _as_aware(end)
        return [
            record for record in self.get_all() if start <= record.timestamp <= end
        ]

    def get_for_source(self, source: ProteinSource | str) -> list[CalculationRecord]:
        """Return records that used the given source."""
        source_id = source.id if isinstance(source, ProteinSource) else source
        return [
            record
            for record in self.get_all()
            if any(item.source.id == source_id for item in record.sources)
        ]

    def filter(
        self, query: str = "", category: ProteinCategory = ProteinCategory.ALL
    ) -> list[CalculationRecord]:
        """Filter records by source category and source name substring."""
        return filter_records(self.get_all(), query, category)

    def save(self, record: CalculationRecord) -> HistoryOutcome:
        """Prepend a record, dropping the oldest entries over capacity."""
        loaded = self.load()
        if loaded.outcome is HistoryOutcome.STORAGE_UNAVAILABLE:
            return loaded.outcome
        history = [record, *loaded.records][: self.max_items]
        return self._persist(history)

    def delete(self, record_id: str) -> HistoryOutcome:
        """Remove a record by id; unknown ids are a no-op."""
        loaded = self.load()
        if loaded.outcome is HistoryOutcome.STORAGE_UNAVAILABLE:
            return loaded.outcome
        remaining = [record for record in loaded.records if record.id != record_id]
        if len(remaining) == len(loaded.records):
            return HistoryOutcome.OK
        return self._persist(remaining)

    def clear(self) -> HistoryOutcome:
        """Remove every record."""
        try:
            self.backend.remove(self.key)
        except Exception:
            logger.exception("Failed to clear calculation history")
            return HistoryOutcome.STORAGE_UNAVAILABLE
        return HistoryOutcome.OK

    def export(self) -> str:
        """Serialize the whole history as pretty-printed JSON."""
        return serialize_history(self.get_all(), indent=2)

    def import_history(
        self, blob: str, replace_existing: bool = False
    ) -> HistoryOutcome:
        """Import serialized history, replacing or merging by id."""
        try:
            imported = parse_history(blob)
        except ValueError as exc:
            logger.warning("Rejected history import: %s", exc)
            return HistoryOutcome.PARSE_ERROR

        if replace_existing:
            return self._persist(imported[: self.max_items])

        loaded = self.load()
        if loaded.outcome is HistoryOutcome.STORAGE_UNAVAILABLE:
            return loaded.outcome
        existing_ids = {record.id for record in loaded.records}
        merged = loaded.records + [
            record for record in imported if record.id not in existing_ids
        ]
        merged.sort(key=lambda record: record.timestamp, reverse=True)
        logger.info(
            "Merged %d imported calculations into history",
            len(merged) - len(loaded.records),
        )
        return self._persist(merged[: self.max_items])

    def is_available(self) -> bool:
        """Probe the backend with a throwaway write and delete."""
        try:
            self.backend.write(_PROBE_KEY, "test")
            self.backend.remove(_PROBE_KEY)
        except Exception:
            logger.warning("History storage is unavailable", exc_info=True)
            return False
        return True

    def _persist(self, history: list[CalculationRecord]) -> HistoryOutcome:
        try:
            self.backend.write(self.key, serialize_history(history))
        except Exception:
            logger.exception("Failed to save calculation history")
            return HistoryOutcome.STORAGE_UNAVAILABLE
        logger.debug("Saved %d calculations to history", len(history))
        return HistoryOutcome.OK


def filter_records(
    records: list[CalculationRecord],
    query: str = "",
    category: ProteinCategory = ProteinCategory.ALL,
) -> list[CalculationRecord]:
    """Keep records with a source in ``category`` whose name contains ``query``."""
    if category != ProteinCategory.ALL:
        records = [
            record
            for record in records
            if any(item.source.category == category for item in record.sources)
        ]
    needle = query.strip().casefold()
    if needle:
        records = [
            record
            for record in records
            if any(needle in item.source.name.casefold() for item in record.sources)
        ]
    return records


def export_filename(today: date | None = None) -> str:
    """Return the download filename for an export made on ``today``."""
    day = today or datetime.now(tz=UTC).date()
    return f"protein-calculations-{day.isoformat()}.json"


def serialize_history(history: list[CalculationRecord], indent: int | None = None) -> str:
    """Serialize records into the persisted JSON array."""
    return json.dumps([record_to_payload(record) for record in history], indent=indent)


def parse_history(raw: str) -> list[CalculationRecord]:
    """Parse a persisted JSON array into records."""
    try:
        data = json.loads(raw)
    except RecursionError as exc:
        raise HistoryFormatError("History JSON is nested too deeply") from exc
    if not isinstance(data, list):
        raise HistoryFormatError("History must be a JSON array")
    return [record_from_payload(item) for item in data]


def record_to_payload(record: CalculationRecord) -> dict[str, object]:
    """Convert a record into its persisted JSON shape."""
    payload: dict[str, object] = {
        "id": record.id,
        "statedProtein": record.stated_protein,
        "proteinSource": source_to_payload(record.primary_source),
        "proteinSources": [
            _allocation_to_payload(allocation) for allocation in record.sources
        ],
        "digestibleProtein": record.digestible_protein,
        "digestibilityPercentage": record.digestibility_percentage,
        "calculationMethod": record.calculation_method.value,
        "timestamp": record.timestamp.isoformat(),
    }
    if record.dv_percentage is not None:
        payload["dvPercentage"] = record.dv_percentage
    return payload


def record_from_payload(payload: object) -> CalculationRecord:
    """Build a record from its persisted JSON shape."""
    if not isinstance(payload, dict):
        raise HistoryFormatError("History entries must be JSON objects")
    try:
        raw_sources = payload.get("proteinSources")
        if isinstance(raw_sources, list) and raw_sources:
            sources = tuple(_allocation_from_payload(item) for item in raw_sources)
        else:
            sources = (SourceAllocation(source_from_payload(payload["proteinSource"])),)
        dv_percentage = payload.get("dvPercentage")
        return CalculationRecord(
            id=str(payload["id"]),
            stated_protein=float(payload["statedProtein"]),
            dv_percentage=float(dv_percentage) if dv_percentage is not None else None,
            sources=sources,
            digestible_protein=float(payload["digestibleProtein"]),
            digestibility_percentage=float(payload["digestibilityPercentage"]),
            calculation_method=CalculationMethod(payload["calculationMethod"]),
            timestamp=_parse_timestamp(payload["timestamp"]),
        )
    except (KeyError, TypeError) as exc:
        raise HistoryFormatError(f"Invalid history entry: {exc}") from exc


def source_to_payload(source: ProteinSource) -> dict[str, object]:
    """Snapshot a source for persistence."""
    payload: dict[str, object] = {
        "id": source.id,
        "name": source.name,
        "category": source.category.value,
    }
    if source.diaas_score is not None:
        payload["diaasScore"] = source.diaas_score
    if source.pdcaas_score is not None:
        payload["pdcaasScore"] = source.pdcaas_score
    if source.description is not None:
        payload["description"] = source.description
    return payload


def source_from_payload(payload: object) -> ProteinSource:
    """Restore a source snapshot."""
    if not isinstance(payload, dict):
        raise HistoryFormatError("Protein source must be a JSON object")
    diaas = payload.get("diaasScore")
    pdcaas = payload.get("pdcaasScore")
    return ProteinSource(
        id=str(payload["id"]),
        name=str(payload["name"]),
        category=ProteinCategory(payload.get("category", ProteinCategory.OTHER)),
        diaas_score=float(diaas) if diaas is not None else None,
        pdcaas_score=float(pdcaas) if pdcaas is not None else None,
        description=payload.get("description"),
    )


def _allocation_to_payload(allocation: SourceAllocation) -> dict[str, object]:
    payload: dict[str, object] = {"source": source_to_payload(allocation.source)}
    if allocation.percentage is not None:
        payload["percentage"] = allocation.percentage
    return payload


def _allocation_from_payload(payload: object) -> SourceAllocation:
    if not isinstance(payload, dict):
        raise HistoryFormatError("Source allocations must be JSON objects")
    percentage = payload.get("percentage")
    return SourceAllocation(
        source=source_from_payload(payload["source"]),
        percentage=float(percentage) if percentage is not None else None,
    )


def _parse_timestamp(raw: object) -> datetime:
    if not isinstance(raw, str) or not raw:
        raise HistoryFormatError("Timestamp must be an ISO-8601 string")
    return _as_aware(datetime.fromisoformat(raw))


def _as_aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
