"""FastAPI application factory."""

import logging
from datetime import UTC, datetime

from fastapi import FastAPI, HTTPException, Request, Response, status

from protein_calculator.api.models import (
    AllocationRequest,
    AllocationResponse,
    CalculationRequest,
    CalculationResponse,
    CombinationModel,
    RatingModel,
    RecordModel,
    ResultModel,
    SectionModel,
    SourceModel,
    StatisticsModel,
    TopicModel,
)
from protein_calculator.app_logging import configure_logging
from protein_calculator.containers import AppContainer
from protein_calculator.domain.calculations import CalculationInput, SourceAllocation
from protein_calculator.domain.sources import ProteinCategory, ProteinSource
from protein_calculator.education import EducationTopic, get_topic
from protein_calculator.services.calculator import rate_source, validate_input
from protein_calculator.services.catalog import ProteinSourceCatalog
from protein_calculator.services.history import (
    HistoryOutcome,
    export_filename,
    filter_records,
)

TOP_SOURCES_ON_EDUCATION_PAGE = 8


def create_app(container: AppContainer) -> FastAPI:  # noqa: C901, PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Protein Quality Calculator")
    app.state.container = container

    @app.get("/health")
    async def health(request: Request) -> dict[str, str]:
        """Health check including history storage availability."""
        state_container: AppContainer = request.app.state.container
        available = state_container.history_store.is_available()
        return {
            "status": "ok",
            "storage": "available" if available else "unavailable",
        }

    @app.get("/sources")
    async def list_sources(
        request: Request,
        category: ProteinCategory = ProteinCategory.ALL,
        q: str = "",
    ) -> dict[str, list[SourceModel]]:
        """List or search protein sources."""
        catalog: ProteinSourceCatalog = request.app.state.container.catalog
        sources = catalog.search(q, category)
        return {"sources": [SourceModel.from_domain(source) for source in sources]}

    @app.get("/sources/top")
    async def top_sources(
        request: Request, limit: int = 10
    ) -> dict[str, list[SourceModel]]:
        """Return the highest quality sources."""
        catalog: ProteinSourceCatalog = request.app.state.container.catalog
        sources = catalog.get_top_by_quality(limit)
        return {"sources": [SourceModel.from_domain(source) for source in sources]}

    @app.get("/sources/{source_id}")
    async def source_detail(source_id: str, request: Request) -> SourceModel:
        """Return a single source."""
        return SourceModel.from_domain(_require_source(request, source_id))

    @app.get("/sources/{source_id}/rating")
    async def source_rating(source_id: str, request: Request) -> RatingModel:
        """Return the quality rating of a source."""
        source = _require_source(request, source_id)
        return RatingModel.from_domain(rate_source(source))

    @app.post("/allocations/suggest")
    async def suggest_allocation(
        payload: AllocationRequest, request: Request
    ) -> AllocationResponse:
        """Suggest default percentages for the selected sources."""
        state_container: AppContainer = request.app.state.container
        sources, missing = _resolve_sources(state_container.catalog, payload.source_ids)
        if missing:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail={"errors": [_unknown_source_message(item) for item in missing]},
            )
        percentages = state_container.allocation_advisor.suggest(sources)
        return AllocationResponse(
            sources=[SourceModel.from_domain(source) for source in sources],
            percentages=percentages,
        )

    @app.get("/allocations/combinations")
    async def list_combinations(
        request: Request,
    ) -> dict[str, list[CombinationModel]]:
        """Return the common combination table."""
        state_container: AppContainer = request.app.state.container
        combinations = state_container.allocation_advisor.combinations()
        return {
            "combinations": [
                CombinationModel.from_domain(combination)
                for combination in combinations
            ]
        }

    @app.post("/calculations")
    async def calculate(
        payload: CalculationRequest, request: Request
    ) -> CalculationResponse:
        """Validate, calculate and store a protein quality calculation."""
        state_container: AppContainer = request.app.state.container
        allocations: list[SourceAllocation] = []
        missing: list[str] = []
        for selection in payload.sources:
            source = state_container.catalog.find_by_id(selection.source_id)
            if source is None:
                missing.append(selection.source_id)
                continue
            allocations.append(
                SourceAllocation(source=source, percentage=selection.percentage)
            )
        report = validate_input(
            payload.stated_protein, allocations, payload.dv_percentage
        )
        errors = [_unknown_source_message(item) for item in missing] + report.errors
        if errors:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail={"errors": errors},
            )

        calculation = CalculationInput(
            stated_protein=payload.stated_protein or 0.0,
            dv_percentage=payload.dv_percentage,
            sources=tuple(allocations),
        )
        result = state_container.calculator.calculate(calculation)
        record = state_container.calculator.create_record(calculation, result)
        outcome = state_container.history_store.save(record)
        if not outcome:
            logger.warning(
                "Calculation not saved to history", extra={"outcome": outcome.value}
            )
        return CalculationResponse(
            result=ResultModel.from_domain(result),
            record=RecordModel.from_domain(record),
            saved=bool(outcome),
        )

    @app.get("/history")
    async def list_history(  # noqa: PLR0913
        request: Request,
        start: datetime | None = None,
        end: datetime | None = None,
        source_id: str | None = None,
        q: str = "",
        category: ProteinCategory = ProteinCategory.ALL,
    ) -> dict[str, list[RecordModel]]:
        """Return history entries, newest first, with optional filters."""
        store = request.app.state.container.history_store
        if start is not None or end is not None:
            records = store.get_in_range(
                start or datetime.min.replace(tzinfo=UTC),
                end or datetime.max.replace(tzinfo=UTC),
            )
        else:
            records = store.get_all()
        if source_id is not None:
            matching = {record.id for record in store.get_for_source(source_id)}
            records = [record for record in records if record.id in matching]
        records = filter_records(records, q, category)
        return {"history": [RecordModel.from_domain(record) for record in records]}

    @app.get("/history/statistics")
    async def history_statistics(request: Request) -> StatisticsModel:
        """Return statistics for the current history."""
        state_container: AppContainer = request.app.state.container
        history = state_container.history_store.get_all()
        return StatisticsModel.from_domain(state_container.statistics.compute(history))

    @app.get("/history/export")
    async def export_history(request: Request) -> Response:
        """Download the history as a JSON file."""
        store = request.app.state.container.history_store
        return Response(
            content=store.export(),
            media_type="application/json",
            headers={
                "Content-Disposition": f'attachment; filename="{export_filename()}"'
            },
        )

    @app.post("/history/import")
    async def import_history(request: Request, replace: bool = False) -> dict[str, str]:
        """Import an exported history file, merging unless ``replace`` is set."""
        store = request.app.state.container.history_store
        try:
            body = (await request.body()).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="History file must be UTF-8 encoded JSON",
            ) from exc
        outcome = store.import_history(body, replace_existing=replace)
        _raise_for_outcome(outcome)
        return {"status": "ok"}

    @app.delete("/history/{record_id}")
    async def delete_history_entry(record_id: str, request: Request) -> dict[str, str]:
        """Delete a history entry; unknown ids succeed."""
        store = request.app.state.container.history_store
        _raise_for_outcome(store.delete(record_id))
        return {"status": "ok"}

    @app.delete("/history")
    async def clear_history(request: Request) -> dict[str, str]:
        """Delete every history entry."""
        store = request.app.state.container.history_store
        _raise_for_outcome(store.clear())
        return {"status": "ok"}

    @app.get("/education")
    async def list_topics() -> dict[str, list[dict[str, str]]]:
        """List educational topics."""
        return {
            "topics": [
                {"topic": topic.value, "title": topic.display_name}
                for topic in EducationTopic
            ]
        }

    @app.get("/education/{topic}")
    async def topic_detail(topic: EducationTopic, request: Request) -> TopicModel:
        """Return the content of an educational topic."""
        catalog: ProteinSourceCatalog = request.app.state.container.catalog
        top_sources: list[ProteinSource] = []
        if topic == EducationTopic.PROTEIN_SOURCES:
            top_sources = catalog.get_top_by_quality(TOP_SOURCES_ON_EDUCATION_PAGE)
        return TopicModel(
            topic=topic.value,
            title=topic.display_name,
            sections=[
                SectionModel(title=section.title, paragraphs=list(section.paragraphs))
                for section in get_topic(topic)
            ],
            top_sources=[SourceModel.from_domain(source) for source in top_sources],
        )

    return app


def _require_source(request: Request, source_id: str) -> ProteinSource:
    catalog: ProteinSourceCatalog = request.app.state.container.catalog
    source = catalog.find_by_id(source_id)
    if source is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=_unknown_source_message(source_id),
        )
    return source


def _resolve_sources(
    catalog: ProteinSourceCatalog, source_ids: list[str]
) -> tuple[list[ProteinSource], list[str]]:
    sources: list[ProteinSource] = []
    missing: list[str] = []
    for source_id in source_ids:
        source = catalog.find_by_id(source_id)
        if source is None:
            missing.append(source_id)
        else:
            sources.append(source)
    return sources, missing


def _unknown_source_message(source_id: str) -> str:
    return f"Unknown protein source: {source_id}"


def _raise_for_outcome(outcome: HistoryOutcome) -> None:
    if outcome is HistoryOutcome.PARSE_ERROR:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="History data could not be read",
        )
    if outcome is HistoryOutcome.STORAGE_UNAVAILABLE:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="History storage is unavailable",
        )
