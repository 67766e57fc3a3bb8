"""Read-only catalog of protein sources."""

from collections.abc import Iterable
from dataclasses import dataclass

from protein_calculator.domain.sources import (
    ProteinCategory,
    ProteinSource,
    ranking_score,
)
from protein_calculator.protein_sources import PROTEIN_SOURCES


@dataclass(frozen=True)
class ProteinSourceCatalog:
    """Lookup, filtering and search over the protein source table."""

    sources: tuple[ProteinSource, ...]

    @classmethod
    def from_sources(
        cls, sources: Iterable[ProteinSource] = PROTEIN_SOURCES
    ) -> "ProteinSourceCatalog":
        """Create a catalog from any iterable of sources."""
        return cls(sources=tuple(sources))

    def get_all(self) -> list[ProteinSource]:
        """Return all sources sorted by name."""
        return _sorted_by_name(self.sources)

    def get_by_category(self, category: ProteinCategory) -> list[ProteinSource]:
        """Return sources in a category; ALL returns every source."""
        if category == ProteinCategory.ALL:
            return self.get_all()
        return _sorted_by_name(
            source for source in self.sources if source.category == category
        )

    def search(
        self, query: str, category: ProteinCategory = ProteinCategory.ALL
    ) -> list[ProteinSource]:
        """Search names and descriptions within a category."""
        sources = self.get_by_category(category)
        if not query.strip():
            return sources
        needle = query.casefold()
        return [
            source
            for source in sources
            if needle in source.name.casefold()
            or needle in (source.description or "").casefold()
        ]

    def get_top_by_quality(self, limit: int = 10) -> list[ProteinSource]:
        """Return the highest scoring sources, ties kept in table order."""
        ranked = sorted(self.sources, key=ranking_score, reverse=True)
        return ranked[: max(limit, 0)]

    def find_by_id(self, source_id: str) -> ProteinSource | None:
        """Return a source by id, if present."""
        for source in self.sources:
            if source.id == source_id:
                return source
        return None


def _sorted_by_name(sources: Iterable[ProteinSource]) -> list[ProteinSource]:
    return sorted(sources, key=lambda source: source.name.casefold())
