"""Extension-keyed decorations for file listings.

This module provides ExtensionDecorationMap, a case-insensitive mapping from
file extensions (``.zip``, ``.ps1``) to validated style strings.
"""

import logging
from typing import Dict, Iterator, Iterable, Optional, Tuple

from .utils import sgr
from .validation import (
    DuplicateExtensionError,
    validate_extension,
    validate_no_content,
)

logger = logging.getLogger(__name__)

ARCHIVE_EXTENSIONS = (".zip", ".tgz", ".gz", ".tar", ".nupkg", ".cab", ".7z")
SCRIPT_EXTENSIONS = (".ps1", ".psd1", ".psm1", ".ps1xml")

ARCHIVE_DECORATION = sgr(31, 1)
SCRIPT_DECORATION = sgr(33, 1)


class _KeysView:
    """Restartable view over the stored extensions."""

    def __init__(self, entries: Dict[str, Tuple[str, str]]):
        self._entries = entries

    def __iter__(self) -> Iterator[str]:
        return (extension for extension, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"keys({list(self)!r})"


class ExtensionDecorationMap:
    """Case-insensitive mapping of file extensions to decorations.

    Keys must start with a period; values must pass content validation.
    ``add`` refuses to overwrite an existing key while item assignment
    replaces it silently. The spelling used when a key was first stored is
    the one reported by ``keys()``.
    """

    def __init__(self, defaults: bool = True):
        """Initialize the map.

        Args:
            defaults: Populate the built-in archive and script decorations
        """
        # casefolded extension -> (extension as first stored, decoration)
        self._entries: Dict[str, Tuple[str, str]] = {}

        if defaults:
            for extension in ARCHIVE_EXTENSIONS:
                self.add(extension, ARCHIVE_DECORATION)
            for extension in SCRIPT_EXTENSIONS:
                self.add(extension, SCRIPT_DECORATION)

    @staticmethod
    def _key(extension: str) -> str:
        return validate_extension(extension).casefold()

    def add(self, extension: str, decoration: str) -> None:
        """Add a decoration for a new extension.

        Raises:
            InvalidExtensionError: If the extension does not start with a period
            StyleContentError: If the decoration contains renderable text
            DuplicateExtensionError: If the extension is already present
        """
        key = self._key(extension)
        validate_no_content(decoration, extension)
        if key in self._entries:
            raise DuplicateExtensionError(extension)

        self._entries[key] = (extension, decoration)
        logger.debug(f"Added decoration for {extension}")

    def remove(self, extension: str) -> None:
        """Remove an extension; absent extensions are ignored."""
        if self._entries.pop(self._key(extension), None) is not None:
            logger.debug(f"Removed decoration for {extension}")

    def clear(self) -> None:
        """Remove every extension."""
        self._entries.clear()

    def contains_key(self, extension: Optional[str]) -> bool:
        """Check whether an extension has a decoration.

        Empty or missing input returns False; any other value must still be
        a well-formed extension.
        """
        if not extension:
            return False
        return self._key(extension) in self._entries

    def get(self, extension: str, default: Optional[str] = None) -> Optional[str]:
        """Get the decoration for an extension, or ``default`` if absent."""
        entry = self._entries.get(self._key(extension))
        return entry[1] if entry is not None else default

    def keys(self) -> Iterable[str]:
        """Get the stored extensions in insertion order."""
        return _KeysView(self._entries)

    def items(self) -> Iterator[Tuple[str, str]]:
        """Iterate over ``(extension, decoration)`` pairs in insertion order."""
        return iter(list(self._entries.values()))

    def to_dict(self) -> Dict[str, str]:
        """Get a plain dictionary snapshot of the map."""
        return dict(self._entries.values())

    def __getitem__(self, extension: str) -> str:
        entry = self._entries.get(self._key(extension))
        if entry is None:
            raise KeyError(extension)
        return entry[1]

    def __setitem__(self, extension: str, decoration: str) -> None:
        key = self._key(extension)
        validate_no_content(decoration, extension)

        stored_extension = self._entries[key][0] if key in self._entries else extension
        self._entries[key] = (stored_extension, decoration)
        logger.debug(f"Set decoration for {stored_extension}")

    def __contains__(self, extension: object) -> bool:
        return self.contains_key(extension)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ExtensionDecorationMap({self.to_dict()!r})"
