"""Pydantic models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, Field

from protein_calculator.domain.calculations import (
    CalculationRecord,
    CalculationResult,
    CalculationStatistics,
    ProteinQualityRating,
)
from protein_calculator.domain.sources import ProteinSource
from protein_calculator.services.allocation import ProteinCombination


class SourceModel(BaseModel):
    """Protein source payload."""

    id: str
    name: str
    category: str
    diaas_score: float | None = None
    pdcaas_score: float | None = None
    description: str | None = None

    @classmethod
    def from_domain(cls, source: ProteinSource) -> "SourceModel":
        return cls(
            id=source.id,
            name=source.name,
            category=source.category.value,
            diaas_score=source.diaas_score,
            pdcaas_score=source.pdcaas_score,
            description=source.description,
        )


class RatingModel(BaseModel):
    """Quality rating payload."""

    rating: str
    description: str

    @classmethod
    def from_domain(cls, rating: ProteinQualityRating) -> "RatingModel":
        return cls(rating=rating.rating.value, description=rating.description)


class SourceSelection(BaseModel):
    """A source chosen for a calculation, with an optional share."""

    source_id: str
    percentage: float | None = None


class CalculationRequest(BaseModel):
    """Calculator form payload."""

    stated_protein: float | None = None
    dv_percentage: float | None = None
    sources: list[SourceSelection] = Field(default_factory=list)


class ResultModel(BaseModel):
    """Calculation result payload."""

    quality_adjusted_protein: float
    protein_quality_percentage: float
    calculation_method: str
    score_used: float
    adjusted_protein: float | None = None
    dv_discrepancy: float | None = None

    @classmethod
    def from_domain(cls, result: CalculationResult) -> "ResultModel":
        return cls(
            quality_adjusted_protein=result.quality_adjusted_protein,
            protein_quality_percentage=result.protein_quality_percentage,
            calculation_method=result.calculation_method.value,
            score_used=result.score_used,
            adjusted_protein=result.adjusted_protein,
            dv_discrepancy=result.dv_discrepancy,
        )


class AllocationModel(BaseModel):
    """A source with its share of a calculation."""

    source: SourceModel
    percentage: float | None = None


class RecordModel(BaseModel):
    """Calculation history entry payload."""

    id: str
    stated_protein: float
    dv_percentage: float | None = None
    sources: list[AllocationModel]
    digestible_protein: float
    digestibility_percentage: float
    calculation_method: str
    timestamp: datetime

    @classmethod
    def from_domain(cls, record: CalculationRecord) -> "RecordModel":
        return cls(
            id=record.id,
            stated_protein=record.stated_protein,
            dv_percentage=record.dv_percentage,
            sources=[
                AllocationModel(
                    source=SourceModel.from_domain(item.source),
                    percentage=item.percentage,
                )
                for item in record.sources
            ],
            digestible_protein=record.digestible_protein,
            digestibility_percentage=record.digestibility_percentage,
            calculation_method=record.calculation_method.value,
            timestamp=record.timestamp,
        )


class CalculationResponse(BaseModel):
    """Result of a calculation and the history entry it produced."""

    result: ResultModel
    record: RecordModel
    saved: bool


class StatisticsModel(BaseModel):
    """History statistics payload."""

    total_calculations: int
    average_stated_protein: float
    average_quality_adjusted_protein: float
    most_used_sources: list[tuple[str, int]]

    @classmethod
    def from_domain(cls, stats: CalculationStatistics) -> "StatisticsModel":
        return cls(
            total_calculations=stats.total_calculations,
            average_stated_protein=stats.average_stated_protein,
            average_quality_adjusted_protein=stats.average_quality_adjusted_protein,
            most_used_sources=stats.most_used_sources,
        )


class AllocationRequest(BaseModel):
    """Sources to suggest a percentage split for."""

    source_ids: list[str]


class AllocationResponse(BaseModel):
    """Suggested percentages, one per requested source."""

    sources: list[SourceModel]
    percentages: list[float]


class CombinationModel(BaseModel):
    """Common combination payload."""

    sources: list[str]
    percentages: list[float]
    description: str

    @classmethod
    def from_domain(cls, combination: ProteinCombination) -> "CombinationModel":
        return cls(
            sources=list(combination.sources),
            percentages=[float(value) for value in combination.percentages],
            description=combination.description,
        )


class SectionModel(BaseModel):
    """Educational section payload."""

    title: str
    paragraphs: list[str]


class TopicModel(BaseModel):
    """Educational topic payload."""

    topic: str
    title: str
    sections: list[SectionModel]
    top_sources: list[SourceModel] = Field(default_factory=list)
