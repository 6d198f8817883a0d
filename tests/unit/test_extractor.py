"""
Test extraction of tagged keybinding metadata
"""
import re
import types
from dataclasses import FrozenInstanceError

import pytest
from i3_config_search.core.exceptions import ParseError
from i3_config_search.core.models import Entry
from i3_config_search.parsing import extractor
from i3_config_search.parsing.extractor import ConfigMetadata, parse


SIMPLE_CONFIG = """## group1 // description1 // keys1 ##
        bindsym $mod+Ctrl+$alt+Left move workspace to output left
        ## group2 // description2 // keys2 ##
        bindsym $mod+grave exec /usr/bin/x-terminal-emulator"""


class TestParse:
    """Test the tag grammar"""

    def test_parse_simple_config(self):
        """Tags are extracted in source order"""
        config = parse(SIMPLE_CONFIG)

        assert len(config) == 2
        assert config[0] == Entry("group1", "description1", "keys1")
        assert config[1] == Entry("group2", "description2", "keys2")

    def test_parse_without_tags(self):
        """Plain directives are not metadata"""
        sample = """bindsym $mod+Ctrl+$alt+Left move workspace to output left
        bindsym $mod+grave exec /usr/bin/x-terminal-emulator"""

        assert len(parse(sample)) == 0

    def test_parse_empty(self):
        """Empty text gives an empty collection"""
        config = parse("")

        assert len(config) == 0
        assert list(config) == []

    def test_trailing_comment_ignored(self):
        """Text after the closing marker is dropped"""
        config = parse("## group1 // description1 // keys1 ## some comments")

        assert len(config) == 1
        assert config[0] == Entry("group1", "description1", "keys1")

    def test_commented_out_tag(self):
        """A plain comment line never matches, even if it contains a tag"""
        assert len(parse("# ## group1 // description1 // keys1 ## some comments")) == 0

    def test_multiple_words(self):
        """Fields keep their inner whitespace"""
        config = parse("## this is group1 // this is description1 // this is keys1 ##")

        assert config[0] == Entry("this is group1", "this is description1", "this is keys1")

    def test_line_comment_before_tag(self):
        """Ordinary comments around tags are skipped"""
        sample = """# other comment
        ## group1 // description1 // keys1 ##"""
        config = parse(sample)

        assert len(config) == 1
        assert config[0] == Entry("group1", "description1", "keys1")

    def test_indented_tag(self):
        """Leading spaces and tabs before the marker are allowed"""
        config = parse("\t  ## windows // kill focused window // Super+Shift+q ##")

        assert config[0] == Entry("windows", "kill focused window", "Super+Shift+q")

    def test_punctuation_in_fields(self):
        """Fields may contain punctuation other than the delimiters"""
        config = parse("## media // volume up (+5%) // XF86AudioRaiseVolume ##")

        assert config[0].description == "volume up (+5%)"
        assert config[0].keys == "XF86AudioRaiseVolume"

    def test_incomplete_tags_are_skipped(self):
        """Tags missing a field or the closing marker are not entries"""
        sample = "\n".join([
            "## group // description ##",
            "## group // description // keys",
            "## group // description // keys ##",
        ])
        config = parse(sample)

        assert len(config) == 1
        assert config[0] == Entry("group", "description", "keys")

    def test_duplicates_preserved(self):
        """Identical tags stay distinct entries"""
        line = "## group1 // description1 // keys1 ##"
        config = parse("\n".join([line, "bindsym $mod+a focus left", line]))

        assert len(config) == 2
        assert config[0] == config[1]
        assert config[0] is not config[1]

    def test_windows_line_endings(self):
        """Carriage returns do not leak into fields"""
        config = parse("## group1 // description1 // keys1 ##\r\n## group2 // description2 // keys2 ##\r\n")

        assert [entry.group for entry in config] == ["group1", "group2"]
        assert config[1].keys == "keys2"

    def test_grammar_failure(self, monkeypatch):
        """A grammar that cannot be compiled is reported as ParseError"""
        def broken_compile(pattern, flags=0):
            raise re.error("boom")

        fake_re = types.SimpleNamespace(
            escape=re.escape,
            compile=broken_compile,
            error=re.error,
            MULTILINE=re.MULTILINE,
        )
        monkeypatch.setattr(extractor, "re", fake_re)

        with pytest.raises(ParseError):
            parse("## group1 // description1 // keys1 ##")


class TestConfigMetadata:
    """Test the entry collection"""

    def test_classmethod_parse(self):
        """ConfigMetadata.parse is the same as parse"""
        assert ConfigMetadata.parse(SIMPLE_CONFIG) == parse(SIMPLE_CONFIG)

    def test_entries_start_unannotated(self):
        """Freshly parsed entries have no match spans"""
        for entry in parse(SIMPLE_CONFIG):
            assert entry.group_match_spans is None
            assert entry.description_match_spans is None

    def test_entry_text_is_immutable(self):
        """Entry text fields cannot be reassigned"""
        entry = parse(SIMPLE_CONFIG)[0]

        with pytest.raises(FrozenInstanceError):
            entry.group = "other"
        with pytest.raises(FrozenInstanceError):
            entry.keys = "other"
        assert entry.group == "group1"

    def test_filter_keeps_storage_order(self):
        """Filtering returns a view and leaves the entries in place"""
        config = parse(SIMPLE_CONFIG)
        before = list(config.entries)

        results = config.filter("description2")

        assert results[0] is config[1]
        assert config.entries == before
        assert [e is b for e, b in zip(config.entries, before)] == [True, True]


if __name__ == '__main__':
    pytest.main([__file__])
