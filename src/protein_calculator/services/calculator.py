"""Protein quality calculation."""

import math
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from protein_calculator.domain.calculations import (
    CalculationInput,
    CalculationMethod,
    CalculationRecord,
    CalculationResult,
    ProteinQualityRating,
    QualityRating,
    SourceAllocation,
    ValidationReport,
)
from protein_calculator.domain.sources import (
    DiaasScore,
    PdcaasScore,
    ProteinSource,
    Unscored,
    ranking_score,
    resolve_score,
)

FDA_DAILY_VALUE_PROTEIN_G = 50.0
DV_DISCREPANCY_THRESHOLD_G = 0.5
DEFAULT_UNSCORED_SCORE = 0.75
PERCENTAGE_TOLERANCE = 0.01
MAX_DV_PERCENTAGE = 1000.0

MISSING_INPUT_MESSAGE = (
    "Please enter a valid protein amount and select a protein source"
)
PERCENTAGE_RANGE_MESSAGE = "Percentages must be between 0 and 100"


@dataclass
class QualityCalculator:
    """Computes quality-adjusted protein from DIAAS/PDCAAS scores.

    Inputs are expected to be validated with :func:`validate_input` first;
    a non-positive stated amount makes the quality percentage meaningless.
    """

    unscored_score: float = DEFAULT_UNSCORED_SCORE

    def calculate(self, calculation: CalculationInput) -> CalculationResult:
        """Return the quality-adjusted protein for an input."""
        stated = calculation.stated_protein
        base_protein = stated
        adjusted_protein: float | None = None
        dv_discrepancy: float | None = None

        if calculation.dv_percentage and calculation.dv_percentage > 0:
            adjusted_protein = protein_from_dv(calculation.dv_percentage)
            base_protein = adjusted_protein
            discrepancy = abs(adjusted_protein - stated)
            if discrepancy > DV_DISCREPANCY_THRESHOLD_G:
                dv_discrepancy = discrepancy

        score, method = self.effective_score(calculation.sources)
        quality_adjusted = base_protein * score
        return CalculationResult(
            quality_adjusted_protein=quality_adjusted,
            protein_quality_percentage=quality_adjusted / stated * 100,
            calculation_method=method,
            score_used=score,
            adjusted_protein=adjusted_protein,
            dv_discrepancy=dv_discrepancy,
        )

    def effective_score(
        self, allocations: tuple[SourceAllocation, ...]
    ) -> tuple[float, CalculationMethod]:
        """Return the weighted score and the method that produced it."""
        if len(allocations) == 1:
            return self.source_score(allocations[0].source)

        use_percentages = any(
            allocation.percentage is not None for allocation in allocations
        )
        equal_share = 1 / len(allocations) if allocations else 0.0
        total = 0.0
        scored_methods: set[CalculationMethod] = set()
        for allocation in allocations:
            if use_percentages:
                weight = (allocation.percentage or 0.0) / 100
            else:
                weight = equal_share
            score, method = self.source_score(allocation.source)
            total += score * weight
            if not isinstance(resolve_score(allocation.source), Unscored):
                scored_methods.add(method)

        # All-unscored groups report DIAAS, same as a single unscored source.
        if scored_methods == {CalculationMethod.PDCAAS}:
            return total, CalculationMethod.PDCAAS
        return total, CalculationMethod.DIAAS

    def source_score(self, source: ProteinSource) -> tuple[float, CalculationMethod]:
        """Return a single source's score and method, applying the fallback."""
        match resolve_score(source):
            case DiaasScore(value):
                return value, CalculationMethod.DIAAS
            case PdcaasScore(value):
                return value, CalculationMethod.PDCAAS
            case Unscored():
                return self.unscored_score, CalculationMethod.DIAAS

    def create_record(
        self, calculation: CalculationInput, result: CalculationResult
    ) -> CalculationRecord:
        """Build a history record for a finished calculation."""
        return CalculationRecord(
            id=str(uuid4()),
            stated_protein=calculation.stated_protein,
            dv_percentage=calculation.dv_percentage,
            sources=calculation.sources,
            digestible_protein=result.quality_adjusted_protein,
            digestibility_percentage=result.protein_quality_percentage,
            calculation_method=result.calculation_method,
            timestamp=datetime.now(tz=UTC),
        )


def validate_input(
    stated_protein: float | None,
    allocations: list[SourceAllocation],
    dv_percentage: float | None = None,
) -> ValidationReport:
    """Check calculator inputs, collecting user-facing messages."""
    errors: list[str] = []
    if (
        stated_protein is None
        or not math.isfinite(stated_protein)
        or stated_protein <= 0
        or not allocations
    ):
        errors.append(MISSING_INPUT_MESSAGE)

    if dv_percentage is not None and not 0 <= dv_percentage <= MAX_DV_PERCENTAGE:
        errors.append("Daily Value percentage must be between 0 and 1000")

    percentages = [
        allocation.percentage
        for allocation in allocations
        if allocation.percentage is not None
    ]
    total: float | None = None
    if percentages and len(allocations) > 1:
        total = sum(percentages)
        if any(not 0 <= value <= 100 for value in percentages):
            errors.append(PERCENTAGE_RANGE_MESSAGE)
        if len(percentages) != len(allocations):
            errors.append("Enter a percentage for every protein source")
        if abs(total - 100) > PERCENTAGE_TOLERANCE:
            errors.append(f"Percentages must add up to 100% (currently {total:.1f}%)")
    return ValidationReport(errors=errors, total_percentage=total)


def protein_from_dv(dv_percentage: float) -> float:
    """Convert a Daily Value percentage into grams of protein."""
    return dv_percentage / 100 * FDA_DAILY_VALUE_PROTEIN_G


def dv_from_protein(protein_g: float) -> float:
    """Convert grams of protein into a Daily Value percentage."""
    return protein_g / FDA_DAILY_VALUE_PROTEIN_G * 100


def rate_source(source: ProteinSource) -> ProteinQualityRating:
    """Return the quality band for a source's effective score."""
    score = ranking_score(source)
    if score >= 1.0:
        return ProteinQualityRating(
            QualityRating.EXCELLENT, "Complete, high-quality protein"
        )
    if score >= 0.8:  # noqa: PLR2004
        return ProteinQualityRating(
            QualityRating.HIGH, "Good quality protein with minor limitations"
        )
    if score >= 0.6:  # noqa: PLR2004
        return ProteinQualityRating(QualityRating.GOOD, "Moderate quality protein")
    if score >= 0.4:  # noqa: PLR2004
        return ProteinQualityRating(QualityRating.FAIR, "Lower quality protein")
    if score > 0:
        return ProteinQualityRating(QualityRating.POOR, "Limited protein quality")
    return ProteinQualityRating(
        QualityRating.INCOMPLETE, "Missing essential amino acids"
    )
