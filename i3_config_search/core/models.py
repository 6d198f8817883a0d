"""
Data model for extracted keybinding metadata
"""
from dataclasses import dataclass, field, FrozenInstanceError
from typing import List, Optional


_TEXT_FIELDS = frozenset({"group", "description", "keys"})


@dataclass(frozen=True)
class MatchSpan:
    """A contiguous piece of a field, either matched by the query or not"""
    text: str
    matched: bool = False


@dataclass(frozen=True)
class Matched(MatchSpan):
    matched: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Unmatched(MatchSpan):
    matched: bool = field(default=False, init=False)


@dataclass
class Entry:
    """
    One annotated keybinding from the config.

    The text fields are fixed once the entry exists; only the match
    spans change, and only while filtering.
    """
    group: str
    description: str
    keys: str
    group_match_spans: Optional[List[MatchSpan]] = field(default=None, compare=False, repr=False)
    description_match_spans: Optional[List[MatchSpan]] = field(default=None, compare=False, repr=False)

    def __setattr__(self, name, value):
        if name in _TEXT_FIELDS and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    @property
    def search_text(self) -> str:
        """Text the fuzzy matcher runs against"""
        return f"{self.group} {self.description}"

    def clear_match_spans(self) -> None:
        self.group_match_spans = None
        self.description_match_spans = None

    def to_dict(self) -> dict:
        """Plain representation, spans rendered as (text, matched) pairs"""
        def spans(values):
            if values is None:
                return None
            return [{"text": span.text, "matched": span.matched} for span in values]

        return {
            "group": self.group,
            "description": self.description,
            "keys": self.keys,
            "group_match_spans": spans(self.group_match_spans),
            "description_match_spans": spans(self.description_match_spans),
        }


@dataclass(frozen=True)
class Modifiers:
    """Modifier keys held down while searching"""
    shift: bool = False
    control: bool = False
    alt: bool = False
    meta: bool = False

    NAMES = ("shift", "control", "alt", "meta")

    @classmethod
    def none(cls) -> "Modifiers":
        return cls()

    def active(self) -> List[str]:
        """Names of the modifiers that are set, in a fixed order"""
        return [name for name in self.NAMES if getattr(self, name)]

    def __bool__(self) -> bool:
        return any(getattr(self, name) for name in self.NAMES)
