"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from protein_calculator.adapters.file_history_backend import FileHistoryBackend
from protein_calculator.adapters.supabase_history_backend import (
    SupabaseHistoryBackend,
)
from protein_calculator.config import Settings
from protein_calculator.services.allocation import DefaultAllocationAdvisor
from protein_calculator.services.calculator import QualityCalculator
from protein_calculator.services.catalog import ProteinSourceCatalog
from protein_calculator.services.history import HistoryBackend, HistoryStore
from protein_calculator.services.stats import StatisticsAggregator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: ProteinSourceCatalog
    calculator: QualityCalculator
    allocation_advisor: DefaultAllocationAdvisor
    history_store: HistoryStore
    statistics: StatisticsAggregator


def build_history_backend(settings: Settings) -> HistoryBackend:
    """Create the history backend selected in settings."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "supabase_url and supabase_service_key are required "
                "for the supabase storage backend"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseHistoryBackend(client, table=settings.supabase_table)
    return FileHistoryBackend(Path(settings.history_dir))


def build_container(
    settings: Settings | None = None, backend: HistoryBackend | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    history_store = HistoryStore(
        backend=backend or build_history_backend(resolved_settings),
        key=resolved_settings.history_key,
        max_items=resolved_settings.max_history_items,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog=ProteinSourceCatalog.from_sources(),
        calculator=QualityCalculator(
            unscored_score=resolved_settings.unscored_fallback_score
        ),
        allocation_advisor=DefaultAllocationAdvisor(
            min_weight=resolved_settings.min_allocation_weight
        ),
        history_store=history_store,
        statistics=StatisticsAggregator(),
    )
