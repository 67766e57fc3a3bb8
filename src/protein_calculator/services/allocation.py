"""Default percentage suggestions for multi-source calculations."""

from dataclasses import dataclass

from protein_calculator.domain.sources import (
    ProteinCategory,
    ProteinSource,
    ranking_score,
)

NEUTRAL_ALLOCATION_SCORE = 0.5
DEFAULT_MIN_WEIGHT = 0.1
ANIMAL_SHARE = 70.0
PLANT_SHARE = 30.0

_ANIMAL_CATEGORIES = frozenset(
    {ProteinCategory.MEAT, ProteinCategory.DAIRY, ProteinCategory.SUPPLEMENT}
)


@dataclass(frozen=True)
class ProteinCombination:
    """A common food pairing with its typical protein split."""

    sources: tuple[str, ...]
    percentages: tuple[float, ...]
    description: str

    def matches(self, sources: list[ProteinSource]) -> bool:
        """Return True when every pattern names one of the sources."""
        if len(self.sources) != len(sources):
            return False
        names = [source.name.casefold() for source in sources]
        return all(
            any(pattern.casefold() in name for name in names)
            for pattern in self.sources
        )


COMMON_COMBINATIONS: tuple[ProteinCombination, ...] = (
    ProteinCombination(("chicken", "quinoa"), (70, 30), "Chicken and quinoa bowl"),
    ProteinCombination(("beef", "lentils"), (60, 40), "Beef and lentil stew"),
    ProteinCombination(("fish", "rice"), (80, 20), "Fish with rice"),
    ProteinCombination(("milk", "oats"), (60, 40), "Oatmeal with milk"),
    ProteinCombination(("yogurt", "nuts"), (75, 25), "Yogurt with nuts"),
    ProteinCombination(("cheese", "bread"), (70, 30), "Cheese sandwich"),
    ProteinCombination(
        ("beans", "rice"), (60, 40), "Rice and beans (complete protein)"
    ),
    ProteinCombination(("lentils", "quinoa"), (50, 50), "Lentil quinoa salad"),
    ProteinCombination(("peanuts", "bread"), (40, 60), "Peanut butter sandwich"),
    ProteinCombination(("chickpeas", "tahini"), (80, 20), "Hummus"),
    ProteinCombination(("whey", "casein"), (70, 30), "Whey and casein blend"),
    ProteinCombination(
        ("pea protein", "rice protein"), (70, 30), "Plant protein blend"
    ),
    ProteinCombination(("egg", "bread"), (60, 40), "Egg sandwich"),
    ProteinCombination(("milk", "cereal"), (50, 50), "Cereal with milk"),
)


@dataclass
class DefaultAllocationAdvisor:
    """Suggests percentage splits for sources without explicit shares.

    Suggestions are advisory; the calculator never calls the advisor.
    """

    min_weight: float = DEFAULT_MIN_WEIGHT
    combinations_table: tuple[ProteinCombination, ...] = COMMON_COMBINATIONS

    def __post_init__(self) -> None:
        if self.min_weight <= 0:
            raise ValueError("min_weight must be positive")

    def suggest(self, sources: list[ProteinSource]) -> list[float]:
        """Return one percentage per source, in input order, summing to 100."""
        if not sources:
            return []
        if len(sources) == 1:
            return [100.0]

        for combination in self.combinations_table:
            if combination.matches(sources):
                return [float(value) for value in combination.percentages]

        complementary = _complementary_split(sources)
        if complementary is not None:
            return complementary

        return self._quality_weighted(sources)

    def combinations(self) -> list[ProteinCombination]:
        """Return the common combination table."""
        return list(self.combinations_table)

    def _quality_weighted(self, sources: list[ProteinSource]) -> list[float]:
        weights = [
            max(ranking_score(source, NEUTRAL_ALLOCATION_SCORE), self.min_weight)
            for source in sources
        ]
        total_weight = sum(weights)
        rounded = [round(weight / total_weight * 100, 1) for weight in weights]
        residual = 100.0 - sum(rounded)
        largest = rounded.index(max(rounded))
        rounded[largest] = round(rounded[largest] + residual, 1)
        return rounded


def _complementary_split(sources: list[ProteinSource]) -> list[float] | None:
    if len(sources) != 2:  # noqa: PLR2004
        return None
    first, second = sources
    if first.category in _ANIMAL_CATEGORIES and second.category == ProteinCategory.PLANT:
        return [ANIMAL_SHARE, PLANT_SHARE]
    if first.category == ProteinCategory.PLANT and second.category in _ANIMAL_CATEGORIES:
        return [PLANT_SHARE, ANIMAL_SHARE]
    return None
