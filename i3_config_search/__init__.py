"""
i3 Config Searcher

Extracts the annotated keybindings of an i3 config and fuzzily ranks them
against what the user types and the modifier keys they hold.
"""

__version__ = "0.1.0"

from .core.exceptions import I3ConfigSearchError, ParseError, LoadError, KeySequenceError
from .core.models import Entry, MatchSpan, Matched, Unmatched, Modifiers
from .parsing.extractor import ConfigMetadata, parse
from .search.ranker import Ranker, filter_entries
from .search.session import SearchSession
from .keys import KeyChord

__all__ = [
    "ConfigMetadata",
    "Entry",
    "I3ConfigSearchError",
    "KeyChord",
    "KeySequenceError",
    "LoadError",
    "MatchSpan",
    "Matched",
    "Modifiers",
    "ParseError",
    "Ranker",
    "SearchSession",
    "Unmatched",
    "filter_entries",
    "parse",
]
