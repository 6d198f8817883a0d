"""
Ranking of keybinding entries against a query and the held modifiers
"""
import logging
from typing import List, Optional, Sequence, Tuple

from i3_config_search.core.config import ModifierMarkers, SearchConfig
from i3_config_search.core.models import Entry, Modifiers
from i3_config_search.search.highlight import build_spans, split_indices
from i3_config_search.search.matcher import FuzzyMatcher


class Ranker:
    """
    Filters and orders entries for one query at a time.

    Each call refreshes the match spans of every entry it is given, so
    two filter passes over the same entries must not run at once.
    """

    def __init__(self, config: SearchConfig = None, matcher: FuzzyMatcher = None):
        self.config = config or SearchConfig()
        self.matcher = matcher or FuzzyMatcher()
        self.logger = logging.getLogger("Ranker")

    @property
    def markers(self) -> ModifierMarkers:
        return self.config.markers

    def filter(
        self,
        entries: Sequence[Entry],
        query: str,
        modifiers: Optional[Modifiers] = None,
    ) -> List[Entry]:
        """
        Rank entries by how well ``query`` fuzzy-matches them

        Args:
            entries: Entries to rank; their order is left untouched
            query: Text typed by the user, empty to list everything
            modifiers: Modifier keys held down, each one restricts the
                results to bindings that use it

        Returns:
            The matching entries, best first, each with fresh match spans
        """
        modifiers = modifiers or Modifiers.none()
        scored: List[Tuple[int, Entry]] = []

        for entry in entries:
            entry.clear_match_spans()

            result = self.matcher.fuzzy_indices(entry.search_text, query)
            if result is None:
                continue
            if not self.allows(entry, modifiers):
                continue

            score, indices = result
            self.annotate(entry, indices)
            scored.append((score, entry))

        scored.sort(key=lambda item: item[0], reverse=True)
        ranked = [entry for _, entry in scored]
        if self.config.max_results is not None:
            ranked = ranked[:self.config.max_results]

        self.logger.debug(
            f"Query '{query}' with modifiers {modifiers.active()}: "
            f"{len(ranked)} of {len(entries)} entries"
        )
        return ranked

    def allows(self, entry: Entry, modifiers: Modifiers) -> bool:
        """True if ``entry.keys`` names every modifier that is held"""
        keys = entry.keys.lower()
        return all(
            self.markers.marker_for(name) in keys
            for name in modifiers.active()
        )

    @staticmethod
    def annotate(entry: Entry, indices: Sequence[int]) -> None:
        group_indices, description_indices = split_indices(indices, len(entry.group))
        entry.group_match_spans = build_spans(entry.group, group_indices)
        entry.description_match_spans = build_spans(entry.description, description_indices)


def filter_entries(
    entries: Sequence[Entry],
    query: str,
    modifiers: Optional[Modifiers] = None,
    markers: Optional[ModifierMarkers] = None,
    max_results: Optional[int] = None,
) -> List[Entry]:
    """Rank ``entries`` with a one-off ranker"""
    config = SearchConfig(
        max_results=max_results,
        markers=markers or ModifierMarkers(),
    )
    return Ranker(config).filter(entries, query, modifiers)
