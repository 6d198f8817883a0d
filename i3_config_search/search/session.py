"""
Interactive search state: current query, held modifiers and selection
"""
import logging
from typing import TYPE_CHECKING, List, Optional

from i3_config_search.core.config import SearchConfig
from i3_config_search.core.models import Entry, Modifiers
from i3_config_search.search.ranker import Ranker

if TYPE_CHECKING:
    from i3_config_search.parsing.extractor import ConfigMetadata


class SearchSession:
    """
    Keeps the ranked view in sync with what the user types and holds.

    The selection is an index into the current results rather than a
    flag on an entry, and is reset whenever the results are recomputed.
    """

    def __init__(self, metadata: "ConfigMetadata", config: SearchConfig = None):
        self.metadata = metadata
        self.ranker = Ranker(config)
        self.logger = logging.getLogger("SearchSession")
        self.query = ""
        self.modifiers = Modifiers.none()
        self.results: List[Entry] = []
        self.selected_index: Optional[int] = None
        self.refresh()

    def set_query(self, query: str) -> List[Entry]:
        self.query = query
        return self.refresh()

    def set_modifiers(self, modifiers: Modifiers) -> List[Entry]:
        if modifiers == self.modifiers:
            return self.results
        self.modifiers = modifiers
        return self.refresh()

    def refresh(self) -> List[Entry]:
        """Re-run the filter with the current query and modifiers"""
        self.results = self.ranker.filter(self.metadata.entries, self.query, self.modifiers)
        self.selected_index = 0 if self.results else None
        return self.results

    @property
    def selected(self) -> Optional[Entry]:
        if self.selected_index is None:
            return None
        return self.results[self.selected_index]

    def select_next(self) -> Optional[Entry]:
        if self.results:
            self.selected_index = (self.selected_index + 1) % len(self.results)
        return self.selected

    def select_previous(self) -> Optional[Entry]:
        if self.results:
            self.selected_index = (self.selected_index - 1) % len(self.results)
        return self.selected
