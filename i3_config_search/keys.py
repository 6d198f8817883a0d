"""
Parsing of the keys annotation into modifiers and a key sequence
"""
import re
from dataclasses import dataclass
from typing import Optional

from i3_config_search.core.config import ModifierMarkers
from i3_config_search.core.exceptions import KeySequenceError
from i3_config_search.core.models import Modifiers


_SEPARATORS = re.compile(r"[\s+\-]+")


@dataclass(frozen=True)
class KeyChord:
    """Modifiers to hold and the letters to type while holding them"""
    modifiers: Modifiers
    sequence: str

    @classmethod
    def parse(cls, keys: str, markers: Optional[ModifierMarkers] = None) -> "KeyChord":
        """
        Parse a keys annotation such as ``"Super+Shift+q"``

        Only the configured markers are recognised, so a variable such as
        ``$mod`` is left in the sequence and rejected unless it is set as
        a marker, e.g. ``ModifierMarkers(meta="$mod")``.

        Raises:
            KeySequenceError: if what remains after removing the
                modifiers is not made of ASCII letters
        """
        markers = markers or ModifierMarkers()
        buffer = keys.lower()
        held = {}
        for name in Modifiers.NAMES:
            marker = markers.marker_for(name)
            held[name] = marker in buffer
            buffer = buffer.replace(marker, " ")

        sequence = _SEPARATORS.sub("", buffer)
        if not sequence or not (sequence.isascii() and sequence.isalpha()):
            raise KeySequenceError(f"Keys aren't alphabetic: {keys!r}")

        return cls(modifiers=Modifiers(**held), sequence=sequence)

    def __str__(self) -> str:
        return "+".join(self.modifiers.active() + [self.sequence])
