"""Tests for the style registry."""

import threading

import pytest
from pydantic import ValidationError

from termstyle.style_engine import (
    FormattingData,
    OutputRendering,
    StyleContentError,
    StyleRegistry,
    get_style,
)
from termstyle.style_engine import registry as registry_module

FIXED = {
    "reset": "\x1b[0m",
    "bold": "\x1b[1m",
    "bold_off": "\x1b[22m",
    "italic": "\x1b[3m",
    "italic_off": "\x1b[23m",
    "underline": "\x1b[4m",
    "underline_off": "\x1b[24m",
    "blink": "\x1b[5m",
    "blink_off": "\x1b[25m",
    "hidden": "\x1b[8m",
    "hidden_off": "\x1b[28m",
    "reverse": "\x1b[7m",
    "reverse_off": "\x1b[27m",
    "strikethrough": "\x1b[9m",
    "strikethrough_off": "\x1b[29m",
}


class TestFixedSequences:
    """Test the non-settable control sequences."""

    @pytest.mark.parametrize("name,sequence", FIXED.items())
    def test_values(self, registry, name, sequence):
        """Each constant has its SGR code."""
        assert getattr(registry, name) == sequence
        assert getattr(StyleRegistry, name) == sequence

    def test_fixed_sequences_listing(self):
        """The listing covers every constant in order."""
        assert StyleRegistry.fixed_sequences() == FIXED

    def test_cannot_be_assigned(self, registry):
        """Constants are not settable on an instance."""
        with pytest.raises(AttributeError):
            registry.reset = ""
        assert registry.reset == "\x1b[0m"


class TestRegistrySettings:
    """Test settable registry state."""

    def test_output_rendering(self, registry):
        """Rendering mode defaults to automatic and can be changed."""
        assert registry.output_rendering == OutputRendering.AUTOMATIC

        registry.output_rendering = OutputRendering.PLAIN_TEXT
        assert registry.output_rendering == OutputRendering.PLAIN_TEXT

        registry.output_rendering = "host"
        assert registry.output_rendering == OutputRendering.HOST

        with pytest.raises(ValidationError):
            registry.output_rendering = "sometimes"

    def test_groups_are_mutated_in_place(self, registry):
        """Group fields change through the owned group."""
        registry.formatting.error = "\x1b[35m"
        registry.progress.max_width = 40
        registry.file_info.extension.add(".log", "\x1b[90m")

        assert registry.formatting.error == "\x1b[35m"
        assert registry.progress.max_width == 40
        assert registry.file_info.extension[".LOG"] == "\x1b[90m"

    def test_groups_cannot_be_replaced(self, registry):
        """Owned groups are never swapped wholesale."""
        with pytest.raises(ValidationError):
            registry.formatting = FormattingData()

    def test_rejected_write_leaves_group_untouched(self, registry):
        """No partial application on rejection."""
        with pytest.raises(StyleContentError):
            registry.formatting.error = "\x1b[31mBOOM"
        assert registry.formatting.error == "\x1b[31;1m"

    def test_registries_are_independent(self):
        """Directly built registries share no state."""
        first, second = StyleRegistry(), StyleRegistry()
        first.formatting.warning = "\x1b[35m"
        first.file_info.extension.clear()

        assert second.formatting.warning == "\x1b[33;1m"
        assert len(second.file_info.extension) == 11

    def test_injected_groups(self):
        """Groups can be supplied when building a registry."""
        formatting = FormattingData(error="\x1b[35m")
        registry = StyleRegistry(formatting=formatting)
        assert registry.formatting is formatting

    def test_format_hyperlink(self, registry):
        """Hyperlinks embed the text between OSC 8 markers."""
        assert registry.format_hyperlink("docs", "https://example.com") == (
            "\x1b]8;;https://example.com\x1b\\docs\x1b]8;;\x1b\\"
        )

    def test_palettes(self, registry):
        """Palettes are reachable from the registry."""
        assert registry.foreground.from_rgb(0xFF0000) == "\x1b[38;2;255;0;0m"
        assert registry.background.from_rgb(255, 0, 0) == "\x1b[48;2;255;0;0m"


class TestProcessWideRegistry:
    """Test the lazily created global registry."""

    def test_same_instance(self):
        """Repeated access returns the same registry."""
        assert get_style() is get_style()
        assert StyleRegistry.instance() is get_style()

    def test_single_initialization_across_threads(self, monkeypatch):
        """Racing threads all see one registry."""
        monkeypatch.setattr(registry_module, "_registry", None)

        barrier = threading.Barrier(8)
        results = []

        def worker():
            barrier.wait()
            results.append(get_style())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(result is results[0] for result in results)
