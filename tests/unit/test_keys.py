"""
Test key chord parsing
"""
import pytest
from i3_config_search.core.config import ModifierMarkers
from i3_config_search.core.exceptions import KeySequenceError
from i3_config_search.core.models import Modifiers
from i3_config_search.keys import KeyChord


class TestKeyChord:
    """Test splitting keys annotations into modifiers and keys"""

    def test_modifiers_and_key(self):
        """Markers become modifier flags, the rest is the sequence"""
        chord = KeyChord.parse("Super+Shift+q")

        assert chord.modifiers == Modifiers(shift=True, meta=True)
        assert chord.sequence == "q"

    def test_named_key(self):
        """Multi-letter key names are kept as a sequence"""
        chord = KeyChord.parse("Ctrl+Alt+Left")

        assert chord.modifiers == Modifiers(control=True, alt=True)
        assert chord.sequence == "left"

    def test_no_modifiers(self):
        """A bare key has no modifiers"""
        chord = KeyChord.parse("d")

        assert not chord.modifiers
        assert chord.sequence == "d"

    def test_not_alphabetic(self):
        """Digits or symbols in the remaining keys are rejected"""
        with pytest.raises(KeySequenceError):
            KeyChord.parse("Super+1")
        with pytest.raises(KeySequenceError):
            KeyChord.parse("Super+grave~")

    def test_mod_variable_needs_a_marker(self):
        """$mod is not a default marker and is left in the sequence"""
        with pytest.raises(KeySequenceError):
            KeyChord.parse("$mod+q")

        chord = KeyChord.parse("$mod+q", ModifierMarkers(meta="$mod"))
        assert chord.modifiers == Modifiers(meta=True)
        assert chord.sequence == "q"

    def test_only_modifiers(self):
        """A chord needs at least one key to type"""
        with pytest.raises(KeySequenceError):
            KeyChord.parse("Super+Shift")
        with pytest.raises(KeySequenceError):
            KeyChord.parse("")

    def test_custom_markers(self):
        """Markers from configuration are honoured"""
        markers = ModifierMarkers(meta="$mod", control="Control")
        chord = KeyChord.parse("$mod+Control+Return", markers)

        assert chord.modifiers == Modifiers(control=True, meta=True)
        assert chord.sequence == "return"

    def test_str(self):
        """Chords render modifiers first in a fixed order"""
        assert str(KeyChord.parse("Super+Shift+q")) == "shift+meta+q"


if __name__ == '__main__':
    pytest.main([__file__])
