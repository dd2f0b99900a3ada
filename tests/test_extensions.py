"""Tests for the extension decoration map."""

import pytest

from termstyle.style_engine.extensions import (
    ARCHIVE_DECORATION,
    ARCHIVE_EXTENSIONS,
    SCRIPT_DECORATION,
    SCRIPT_EXTENSIONS,
    ExtensionDecorationMap,
)
from termstyle.style_engine.validation import (
    DuplicateExtensionError,
    InvalidExtensionError,
    StyleContentError,
)

GREY = "\x1b[90m"
BLUE = "\x1b[34m"


class TestDefaults:
    """Test the built-in decorations."""

    def test_default_keys_in_order(self):
        """Archives come first, then scripts."""
        extensions = ExtensionDecorationMap()
        assert list(extensions.keys()) == [*ARCHIVE_EXTENSIONS, *SCRIPT_EXTENSIONS]

    def test_default_decorations(self):
        """Archives are red and scripts yellow."""
        extensions = ExtensionDecorationMap()
        assert ARCHIVE_DECORATION == "\x1b[31;1m"
        assert SCRIPT_DECORATION == "\x1b[33;1m"
        for extension in (".zip", ".tgz", ".gz", ".tar", ".nupkg", ".cab", ".7z"):
            assert extensions[extension] == ARCHIVE_DECORATION
        for extension in (".ps1", ".psd1", ".psm1", ".ps1xml"):
            assert extensions[extension] == SCRIPT_DECORATION

    def test_empty_map(self):
        """Defaults can be skipped."""
        assert len(ExtensionDecorationMap(defaults=False)) == 0


class TestAddAndSet:
    """Test strict add versus upsert."""

    def setup_method(self):
        self.extensions = ExtensionDecorationMap(defaults=False)

    def test_add_is_case_insensitive(self):
        """Lookups ignore case."""
        self.extensions.add(".txt", GREY)
        assert self.extensions.contains_key(".TXT")
        assert ".Txt" in self.extensions
        assert self.extensions[".TXT"] == GREY

    def test_add_rejects_duplicates(self):
        """Adding an existing key fails and keeps the old value."""
        self.extensions.add(".txt", GREY)
        with pytest.raises(DuplicateExtensionError) as exc_info:
            self.extensions.add(".TXT", BLUE)
        assert exc_info.value.extension == ".TXT"
        assert self.extensions[".txt"] == GREY

    def test_item_assignment_overwrites(self):
        """Item assignment on an existing key replaces the value silently."""
        self.extensions.add(".txt", GREY)
        self.extensions[".TXT"] = BLUE
        assert self.extensions[".txt"] == BLUE
        assert len(self.extensions) == 1

    def test_overwrite_keeps_first_spelling(self):
        """Keys keep the spelling they were first stored with."""
        self.extensions[".Log"] = GREY
        self.extensions[".LOG"] = BLUE
        assert list(self.extensions.keys()) == [".Log"]

    def test_add_rejects_bad_extension(self):
        """Keys must start with a period."""
        with pytest.raises(InvalidExtensionError):
            self.extensions.add("txt", GREY)
        with pytest.raises(InvalidExtensionError):
            self.extensions["txt"] = GREY
        assert len(self.extensions) == 0

    def test_rejects_text_content(self):
        """Values must be pure decoration, for both add and assignment."""
        with pytest.raises(StyleContentError):
            self.extensions.add(".txt", "\x1b[31mTXT")
        self.extensions.add(".txt", GREY)
        with pytest.raises(StyleContentError):
            self.extensions[".txt"] = "TXT"
        assert self.extensions[".txt"] == GREY


class TestLookupAndRemoval:
    """Test membership, lookup, removal and clearing."""

    def setup_method(self):
        self.extensions = ExtensionDecorationMap()

    def test_contains_key_empty_inputs(self):
        """Empty and missing input is simply absent."""
        assert self.extensions.contains_key("") is False
        assert self.extensions.contains_key(None) is False

    def test_contains_key_malformed_raises(self):
        """Malformed non-empty input still raises."""
        with pytest.raises(InvalidExtensionError):
            self.extensions.contains_key("zip")

    def test_getitem_missing_raises_key_error(self):
        """Missing keys raise KeyError."""
        with pytest.raises(KeyError):
            self.extensions[".missing"]

    def test_get_with_default(self):
        """get() returns the default for missing keys."""
        assert self.extensions.get(".ZIP") == ARCHIVE_DECORATION
        assert self.extensions.get(".missing") is None
        assert self.extensions.get(".missing", GREY) == GREY

    def test_remove(self):
        """Removing is case-insensitive."""
        self.extensions.remove(".ZIP")
        assert not self.extensions.contains_key(".zip")
        assert len(self.extensions) == 10

    def test_remove_absent_is_noop(self):
        """Removing an absent key is not an error."""
        self.extensions.remove(".missing")
        assert len(self.extensions) == 11

    def test_remove_validates_shape(self):
        """Removal still checks the key shape."""
        with pytest.raises(InvalidExtensionError):
            self.extensions.remove("zip")

    def test_clear(self):
        """Clearing leaves no keys."""
        self.extensions.clear()
        assert list(self.extensions.keys()) == []
        assert len(self.extensions) == 0


class TestViews:
    """Test key and item views."""

    def test_keys_are_restartable(self):
        """The key view can be iterated more than once."""
        extensions = ExtensionDecorationMap(defaults=False)
        extensions.add(".a", GREY)
        extensions.add(".b", BLUE)

        keys = extensions.keys()
        assert list(keys) == [".a", ".b"]
        assert list(keys) == [".a", ".b"]
        assert len(keys) == 2

    def test_keys_view_is_live(self):
        """The key view reflects later changes."""
        extensions = ExtensionDecorationMap(defaults=False)
        keys = extensions.keys()
        extensions.add(".a", GREY)
        assert list(keys) == [".a"]

    def test_items_and_to_dict(self):
        """Items and snapshots use the stored spelling."""
        extensions = ExtensionDecorationMap(defaults=False)
        extensions.add(".A", GREY)
        extensions[".b"] = BLUE

        assert list(extensions.items()) == [(".A", GREY), (".b", BLUE)]
        assert extensions.to_dict() == {".A": GREY, ".b": BLUE}
        assert list(extensions) == [".A", ".b"]
