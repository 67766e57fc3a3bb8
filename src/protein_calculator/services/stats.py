"""Statistics derived from the calculation history."""

from collections import Counter
from dataclasses import dataclass

from protein_calculator.domain.calculations import (
    CalculationRecord,
    CalculationStatistics,
)

MOST_USED_LIMIT = 5


@dataclass
class StatisticsAggregator:
    """Computes summary numbers from a history snapshot."""

    most_used_limit: int = MOST_USED_LIMIT

    def compute(self, history: list[CalculationRecord]) -> CalculationStatistics:
        """Return totals, averages and the most used sources."""
        total = len(history)
        if total == 0:
            return CalculationStatistics(
                total_calculations=0,
                average_stated_protein=0.0,
                average_quality_adjusted_protein=0.0,
                most_used_sources=[],
            )
        return CalculationStatistics(
            total_calculations=total,
            average_stated_protein=sum(r.stated_protein for r in history) / total,
            average_quality_adjusted_protein=sum(
                r.digestible_protein for r in history
            )
            / total,
            most_used_sources=_most_used(history, self.most_used_limit),
        )


def _most_used(history: list[CalculationRecord], limit: int) -> list[tuple[str, int]]:
    counts: Counter[str] = Counter()
    for record in history:
        names = dict.fromkeys(item.source.name for item in record.sources)
        counts.update(list(names))
    # equal counts keep first-encountered order
    return counts.most_common(limit)
