"""Domain models for quality calculations and their history."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from protein_calculator.domain.sources import ProteinSource


class CalculationMethod(StrEnum):
    """Scoring system used for a calculation."""

    DIAAS = "DIAAS"
    PDCAAS = "PDCAAS"


class QualityRating(StrEnum):
    """Coarse quality bands for a protein source."""

    EXCELLENT = "Excellent"
    HIGH = "High"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    INCOMPLETE = "Incomplete"


@dataclass(frozen=True)
class ProteinQualityRating:
    """Rating band with its short explanation."""

    rating: QualityRating
    description: str


@dataclass(frozen=True)
class SourceAllocation:
    """One ingredient of a calculation, optionally with its share in percent."""

    source: ProteinSource
    percentage: float | None = None


@dataclass(frozen=True)
class CalculationInput:
    """Inputs for a quality calculation."""

    stated_protein: float
    dv_percentage: float | None = None
    sources: tuple[SourceAllocation, ...] = ()

    @classmethod
    def single(
        cls,
        stated_protein: float,
        source: ProteinSource,
        dv_percentage: float | None = None,
    ) -> "CalculationInput":
        """Build an input for a single protein source."""
        return cls(
            stated_protein=stated_protein,
            dv_percentage=dv_percentage,
            sources=(SourceAllocation(source),),
        )


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of a quality calculation."""

    quality_adjusted_protein: float
    protein_quality_percentage: float
    calculation_method: CalculationMethod
    score_used: float
    adjusted_protein: float | None = None
    dv_discrepancy: float | None = None


@dataclass(frozen=True)
class CalculationRecord:
    """A persisted historical calculation."""

    id: str
    stated_protein: float
    sources: tuple[SourceAllocation, ...]
    digestible_protein: float
    digestibility_percentage: float
    calculation_method: CalculationMethod
    timestamp: datetime
    dv_percentage: float | None = None

    @property
    def primary_source(self) -> ProteinSource:
        """The first (or only) source of the calculation."""
        return self.sources[0].source


@dataclass(frozen=True)
class CalculationStatistics:
    """Aggregates derived from the calculation history."""

    total_calculations: int
    average_stated_protein: float
    average_quality_adjusted_protein: float
    most_used_sources: list[tuple[str, int]] = field(default_factory=list)


@dataclass(frozen=True)
class ValidationReport:
    """Result of validating calculator inputs before calculating."""

    errors: list[str]
    total_percentage: float | None = None

    @property
    def is_valid(self) -> bool:
        """True when no validation errors were found."""
        return not self.errors
