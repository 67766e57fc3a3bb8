"""Domain models for protein sources and their quality scores."""

import re
from dataclasses import dataclass
from enum import StrEnum

_NON_ALNUM = re.compile(r"[^a-z0-9]")


class ProteinCategory(StrEnum):
    """Closed set of source categories; ALL is a filter value only."""

    ALL = "all"
    MEAT = "meat"
    DAIRY = "dairy"
    PLANT = "plant"
    SUPPLEMENT = "supplement"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        """Human readable label for the category."""
        return _CATEGORY_DISPLAY[self]


_CATEGORY_DISPLAY = {
    ProteinCategory.ALL: "All Sources",
    ProteinCategory.MEAT: "Meat & Fish",
    ProteinCategory.DAIRY: "Dairy & Eggs",
    ProteinCategory.PLANT: "Plant Sources",
    ProteinCategory.SUPPLEMENT: "Supplements",
    ProteinCategory.OTHER: "Other",
}


def make_source_id(name: str) -> str:
    """Return the stable slug used as a source's natural key."""
    return _NON_ALNUM.sub("_", name.lower())


@dataclass(frozen=True)
class ProteinSource:
    """A row of the protein source reference table."""

    id: str
    name: str
    category: ProteinCategory
    diaas_score: float | None = None
    pdcaas_score: float | None = None
    description: str | None = None

    @classmethod
    def named(
        cls,
        name: str,
        category: ProteinCategory,
        diaas_score: float | None = None,
        pdcaas_score: float | None = None,
        description: str | None = None,
    ) -> "ProteinSource":
        """Build a source whose id is derived from its name."""
        return cls(
            id=make_source_id(name),
            name=name,
            category=category,
            diaas_score=diaas_score,
            pdcaas_score=pdcaas_score,
            description=description,
        )


@dataclass(frozen=True)
class DiaasScore:
    """Source scored with DIAAS."""

    value: float


@dataclass(frozen=True)
class PdcaasScore:
    """Source scored with PDCAAS only."""

    value: float


@dataclass(frozen=True)
class Unscored:
    """Source with neither score."""


ScoreResolution = DiaasScore | PdcaasScore | Unscored


def resolve_score(source: ProteinSource) -> ScoreResolution:
    """Resolve which score a source contributes, preferring DIAAS."""
    if source.diaas_score is not None:
        return DiaasScore(source.diaas_score)
    if source.pdcaas_score is not None:
        return PdcaasScore(source.pdcaas_score)
    return Unscored()


def ranking_score(source: ProteinSource, unscored: float = 0.0) -> float:
    """Return the score used when ordering or weighting sources."""
    match resolve_score(source):
        case DiaasScore(value) | PdcaasScore(value):
            return value
        case Unscored():
            return unscored
