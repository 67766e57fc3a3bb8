"""Tests for the quality calculator."""

import pytest

from protein_calculator.domain.calculations import (
    CalculationInput,
    CalculationMethod,
    QualityRating,
    SourceAllocation,
)
from protein_calculator.domain.sources import ProteinCategory, ProteinSource
from protein_calculator.services.calculator import (
    MISSING_INPUT_MESSAGE,
    PERCENTAGE_RANGE_MESSAGE,
    QualityCalculator,
    dv_from_protein,
    protein_from_dv,
    rate_source,
    validate_input,
)
from tests.conftest import EGG, PDCAAS_ONLY, SOY, TOFU, UNSCORED, WHEY


def test_single_diaas_source() -> None:
    result = QualityCalculator().calculate(CalculationInput.single(25, WHEY))

    assert result.score_used == 1.25
    assert result.calculation_method == CalculationMethod.DIAAS
    assert result.quality_adjusted_protein == pytest.approx(31.25)
    assert result.protein_quality_percentage == pytest.approx(125.0)
    assert result.adjusted_protein is None
    assert result.dv_discrepancy is None


def test_dv_percentage_replaces_base_amount() -> None:
    result = QualityCalculator().calculate(
        CalculationInput.single(20, EGG, dv_percentage=50)
    )

    assert result.adjusted_protein == pytest.approx(25.0)
    assert result.dv_discrepancy == pytest.approx(5.0)
    assert result.quality_adjusted_protein == pytest.approx(28.25)
    assert result.protein_quality_percentage == pytest.approx(141.25)


def test_small_dv_discrepancy_not_reported() -> None:
    result = QualityCalculator().calculate(
        CalculationInput.single(10.3, EGG, dv_percentage=20)
    )

    assert result.adjusted_protein == pytest.approx(10.0)
    assert result.dv_discrepancy is None


def test_zero_dv_percentage_is_ignored() -> None:
    result = QualityCalculator().calculate(
        CalculationInput.single(20, EGG, dv_percentage=0)
    )

    assert result.adjusted_protein is None
    assert result.quality_adjusted_protein == pytest.approx(22.6)


def test_pdcaas_only_source_uses_pdcaas() -> None:
    result = QualityCalculator().calculate(CalculationInput.single(10, PDCAAS_ONLY))

    assert result.calculation_method == CalculationMethod.PDCAAS
    assert result.score_used == 0.6
    assert result.quality_adjusted_protein == pytest.approx(6.0)


def test_unscored_source_uses_fallback() -> None:
    result = QualityCalculator().calculate(CalculationInput.single(10, UNSCORED))

    assert result.score_used == 0.75
    assert result.calculation_method == CalculationMethod.DIAAS
    assert result.quality_adjusted_protein == pytest.approx(7.5)
    assert result.protein_quality_percentage == pytest.approx(75.0)


def test_fallback_score_is_configurable() -> None:
    result = QualityCalculator(unscored_score=0.5).calculate(
        CalculationInput.single(10, UNSCORED)
    )

    assert result.score_used == 0.5


@pytest.mark.parametrize("source", [WHEY, EGG, SOY, TOFU, PDCAAS_ONLY, UNSCORED])
def test_quality_properties_hold_for_every_source(source: ProteinSource) -> None:
    result = QualityCalculator().calculate(CalculationInput.single(17, source))

    assert result.quality_adjusted_protein == pytest.approx(17 * result.score_used)
    assert result.protein_quality_percentage == pytest.approx(
        result.quality_adjusted_protein / 17 * 100
    )


def test_multi_source_weighted_by_percentage() -> None:
    calculation = CalculationInput(
        stated_protein=30,
        sources=(SourceAllocation(SOY, 50), SourceAllocation(TOFU, 50)),
    )

    result = QualityCalculator().calculate(calculation)

    assert result.score_used == pytest.approx(0.885)
    assert result.quality_adjusted_protein == pytest.approx(26.55)
    assert result.calculation_method == CalculationMethod.DIAAS


def test_multi_source_without_percentages_uses_equal_shares() -> None:
    calculation = CalculationInput(
        stated_protein=10,
        sources=(
            SourceAllocation(WHEY),
            SourceAllocation(TOFU),
            SourceAllocation(UNSCORED),
        ),
    )

    result = QualityCalculator().calculate(calculation)

    assert result.score_used == pytest.approx((1.25 + 0.87 + 0.75) / 3)


def test_multi_source_method_pdcaas_when_no_diaas() -> None:
    calculation = CalculationInput(
        stated_protein=10,
        sources=(SourceAllocation(PDCAAS_ONLY, 80), SourceAllocation(UNSCORED, 20)),
    )

    result = QualityCalculator().calculate(calculation)

    assert result.calculation_method == CalculationMethod.PDCAAS
    assert result.score_used == pytest.approx(0.6 * 0.8 + 0.75 * 0.2)


def test_multi_source_all_unscored_reports_diaas() -> None:
    other = ProteinSource.named("Other Powder", ProteinCategory.OTHER)
    calculation = CalculationInput(
        stated_protein=10,
        sources=(SourceAllocation(UNSCORED), SourceAllocation(other)),
    )

    result = QualityCalculator().calculate(calculation)

    assert result.calculation_method == CalculationMethod.DIAAS
    assert result.score_used == pytest.approx(0.75)


def test_create_record_copies_input_and_result() -> None:
    calculator = QualityCalculator()
    calculation = CalculationInput.single(20, EGG, dv_percentage=50)
    result = calculator.calculate(calculation)

    record = calculator.create_record(calculation, result)

    assert record.id
    assert record.stated_protein == 20
    assert record.dv_percentage == 50
    assert record.primary_source == EGG
    assert record.digestible_protein == result.quality_adjusted_protein
    assert record.digestibility_percentage == result.protein_quality_percentage
    assert record.timestamp.tzinfo is not None
    assert calculator.create_record(calculation, result).id != record.id


def test_validate_input_accepts_valid_single_source() -> None:
    report = validate_input(25, [SourceAllocation(WHEY)])

    assert report.is_valid
    assert report.total_percentage is None


@pytest.mark.parametrize("stated", [None, 0, -5, float("nan")])
def test_validate_input_rejects_bad_amount(stated: float | None) -> None:
    report = validate_input(stated, [SourceAllocation(WHEY)])

    assert report.errors == [MISSING_INPUT_MESSAGE]


def test_validate_input_requires_a_source() -> None:
    assert validate_input(10, []).errors == [MISSING_INPUT_MESSAGE]


def test_validate_input_percentages_must_sum_to_100() -> None:
    report = validate_input(
        10, [SourceAllocation(SOY, 60), SourceAllocation(TOFU, 30)]
    )

    assert not report.is_valid
    assert report.total_percentage == pytest.approx(90)
    assert "Percentages must add up to 100% (currently 90.0%)" in report.errors


def test_validate_input_tolerates_rounding() -> None:
    report = validate_input(
        10,
        [
            SourceAllocation(SOY, 33.333),
            SourceAllocation(TOFU, 33.333),
            SourceAllocation(EGG, 33.334),
        ],
    )

    assert report.is_valid


def test_validate_input_rejects_out_of_range_percentage() -> None:
    report = validate_input(
        10, [SourceAllocation(SOY, 120), SourceAllocation(TOFU, -20)]
    )

    assert PERCENTAGE_RANGE_MESSAGE in report.errors


def test_validate_input_requires_all_percentages_when_any_set() -> None:
    report = validate_input(10, [SourceAllocation(SOY, 100), SourceAllocation(TOFU)])

    assert "Enter a percentage for every protein source" in report.errors


def test_validate_input_rejects_dv_out_of_range() -> None:
    report = validate_input(10, [SourceAllocation(SOY)], dv_percentage=1500)

    assert not report.is_valid


def test_dv_conversions() -> None:
    assert protein_from_dv(50) == pytest.approx(25.0)
    assert dv_from_protein(25) == pytest.approx(50.0)


@pytest.mark.parametrize(
    ("diaas", "expected"),
    [
        (1.1, QualityRating.EXCELLENT),
        (0.85, QualityRating.HIGH),
        (0.65, QualityRating.GOOD),
        (0.45, QualityRating.FAIR),
        (0.2, QualityRating.POOR),
        (None, QualityRating.INCOMPLETE),
    ],
)
def test_rate_source(diaas: float | None, expected: QualityRating) -> None:
    source = ProteinSource.named("Sample", ProteinCategory.OTHER, diaas)

    assert rate_source(source).rating == expected
