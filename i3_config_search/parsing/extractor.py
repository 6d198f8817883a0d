"""
Extraction of keybinding metadata from i3 config text.

Bindings are annotated with tag comments of the form::

    ## group // description // keys ##
    bindsym $mod+Return exec i3-sensible-terminal

Only lines whose first non-blank characters are the opening marker are
tags; a plain ``# comment`` line never is, whatever it contains later.
"""
import logging
import re
from typing import Iterator, List, Optional, Union

from i3_config_search.core.config import SearchConfig
from i3_config_search.core.exceptions import ParseError
from i3_config_search.core.models import Entry, Modifiers
from i3_config_search.search.ranker import Ranker


logger = logging.getLogger(__name__)

TAG_MARKER = "##"
FIELD_DELIMITER = "//"


def build_tag_pattern(marker: str = TAG_MARKER, delimiter: str = FIELD_DELIMITER) -> "re.Pattern":
    """
    Compile the tag grammar

    Raises:
        ParseError: if the grammar cannot be compiled
    """
    open_, sep = re.escape(marker), re.escape(delimiter)
    field = r"(?P<{name}>[^\n]*?)"
    pattern = (
        r"^[ \t]*" + open_
        + field.format(name="group") + sep
        + field.format(name="description") + sep
        + field.format(name="keys") + open_
    )
    try:
        return re.compile(pattern, re.MULTILINE)
    except re.error as e:
        raise ParseError(f"failed to build tag grammar: {e}") from e


def iter_entries(text: str, tag_pattern: Optional["re.Pattern"] = None) -> Iterator[Entry]:
    """Yield entries in the order their tags appear in ``text``"""
    tag_pattern = tag_pattern or build_tag_pattern()
    for match in tag_pattern.finditer(text):
        yield Entry(
            group=match.group("group").strip(),
            description=match.group("description").strip(),
            keys=match.group("keys").strip(),
        )


def parse(text: str) -> "ConfigMetadata":
    """
    Parse all tagged entries out of a config

    Args:
        text: Full contents of an i3 config

    Returns:
        ConfigMetadata holding the entries in source order

    Raises:
        ParseError: if the tag grammar cannot be constructed
    """
    entries = list(iter_entries(text, build_tag_pattern()))
    logger.debug(f"Parsed {len(entries)} tagged entries")
    return ConfigMetadata(entries)


class ConfigMetadata:
    """
    The entries of one config, in source order.

    Filtering never reorders or removes entries here; it only refreshes
    their match spans and returns a ranked view.
    """

    def __init__(self, entries: Optional[List[Entry]] = None):
        self.entries: List[Entry] = list(entries or [])

    @classmethod
    def parse(cls, text: str) -> "ConfigMetadata":
        return parse(text)

    def filter(
        self,
        query: str,
        modifiers: Optional[Modifiers] = None,
        config: Optional[SearchConfig] = None,
    ) -> List[Entry]:
        """Rank the entries against ``query`` under the held ``modifiers``"""
        return Ranker(config).filter(self.entries, query, modifiers)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __getitem__(self, index: Union[int, slice]):
        return self.entries[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ConfigMetadata):
            return NotImplemented
        return self.entries == other.entries

    def __repr__(self) -> str:
        return f"ConfigMetadata(entries={len(self.entries)})"
