"""Image file formats and the state behind the open and save dialogs."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from PIL import Image

UNTITLED = "untitled"


@dataclass(frozen=True)
class ImageFormat:
    """An image file format known to the imaging library."""

    name: str
    description: str
    mime_types: Tuple[str, ...]
    extensions: Tuple[str, ...]
    writable: bool


@dataclass
class FileFilter:
    """A named set of MIME types and glob patterns, tied to a format if any."""

    name: str
    mime_types: List[str] = field(default_factory=list)
    patterns: List[str] = field(default_factory=list)
    format: Optional[ImageFormat] = None


class ChooserAction(IntEnum):
    """What a file chooser is opened for."""

    OPEN = 0
    SAVE = 1
    SELECT_FOLDER = 2


_TITLES = {
    ChooserAction.OPEN: "Load Image",
    ChooserAction.SAVE: "Save Image",
    ChooserAction.SELECT_FOLDER: "Open Folder",
}

# Folder last accepted for each kind of chooser, shared by all choosers.
_last_folders: Dict[ChooserAction, Path] = {}


@lru_cache(maxsize=None)
def _formats() -> Tuple[ImageFormat, ...]:
    Image.init()
    by_id: Dict[str, List[str]] = {}
    for ext, format_id in Image.registered_extensions().items():
        by_id.setdefault(format_id, []).append(ext.lstrip(".").lower())
    formats = []
    for format_id, extensions in by_id.items():
        mime = Image.MIME.get(format_id)
        formats.append(
            ImageFormat(
                name=format_id.lower(),
                description=f"The {format_id} image format",
                mime_types=(mime,) if mime else (),
                extensions=tuple(sorted(set(extensions))),
                writable=format_id in Image.SAVE,
            )
        )
    return tuple(sorted(formats, key=lambda fmt: fmt.name))


def available_formats() -> List[ImageFormat]:
    """Every image format that can be read, in a stable order."""
    return list(_formats())


def format_by_suffix(suffix: Optional[str]) -> Optional[ImageFormat]:
    """The format owning a file suffix, compared case-insensitively."""
    if suffix is None:
        return None
    wanted = suffix.lower()
    for fmt in _formats():
        if wanted in fmt.extensions:
            return fmt
    return None


def suffix_from_basename(basename: str) -> Optional[str]:
    """The text after the last period of a file name, or None."""
    head, dot, suffix = basename.rpartition(".")
    return suffix if dot else None


def _stem(basename: str) -> str:
    return basename.rpartition(".")[0]


def strip_known_suffix(basename: str) -> str:
    """Drop the suffix of a file name when it names an image format."""
    if format_by_suffix(suffix_from_basename(basename)) is not None:
        return _stem(basename)
    return basename


def with_extension(basename: str, fmt: Optional[ImageFormat]) -> str:
    """Give a file name the extension of ``fmt``.

    A suffix that already names ``fmt`` is kept; one naming another image
    format is replaced; any other suffix stays and the extension is added.
    """
    if fmt is None:
        return basename
    current = format_by_suffix(suffix_from_basename(basename))
    if current == fmt:
        return basename
    stem = _stem(basename) if current is not None else basename
    return f"{stem}.{fmt.name}"


def build_filters(savable: bool) -> List[FileFilter]:
    """One filter per format; writable formats only when ``savable``.

    For opening, an "All Images" filter covering every format comes first.
    """
    filters: List[FileFilter] = []
    all_images: Optional[FileFilter] = None
    if not savable:
        all_images = FileFilter("All Images")
        filters.append(all_images)

    for fmt in _formats():
        if savable and not fmt.writable:
            continue
        patterns = [f"*.{ext}" for ext in fmt.extensions]
        filters.append(
            FileFilter(fmt.description, list(fmt.mime_types), patterns, fmt)
        )
        if all_images is not None:
            all_images.mime_types.extend(fmt.mime_types)
            all_images.patterns.extend(patterns)
    return filters


def _pictures_folder() -> Path:
    configured = os.environ.get("XDG_PICTURES_DIR")
    return Path(configured) if configured else Path.home() / "Pictures"


class ChooserState:
    """File name, filter and folder chosen in an open or save dialog."""

    def __init__(self, action: Union[ChooserAction, int]) -> None:
        self.action = ChooserAction(action)
        self.title = _TITLES[self.action]
        self.name = UNTITLED
        self.folder = _last_folders.get(self.action, _pictures_folder())
        self.active: Optional[int] = None

        if self.action is ChooserAction.OPEN:
            self.filters = [FileFilter("All Files", patterns=["*"])] + build_filters(False)
        elif self.action is ChooserAction.SAVE:
            self.filters = build_filters(True)
        else:
            self.filters = []

        if len(self.filters) > 1:
            self._activate(1)

    def __repr__(self) -> str:
        return f"ChooserState({self.action.name}, name={self.name!r})"

    @property
    def format(self) -> Optional[ImageFormat]:
        """The format of the active filter, if it has one."""
        if self.active is None:
            return None
        return self.filters[self.active].format

    @property
    def display_name(self) -> str:
        """The chosen name without a suffix that names an image format."""
        return strip_known_suffix(self.name)

    def _activate(self, index: int) -> None:
        self.active = index
        if self.action is ChooserAction.SAVE:
            self.ensure_extension()

    def select_format(self, extension: str) -> bool:
        """Make the filter of the format owning ``extension`` active.

        Returns whether such a filter was found.
        """
        fmt = format_by_suffix(extension)
        if fmt is None:
            return False
        for index, candidate in enumerate(self.filters):
            if candidate.format == fmt:
                self._activate(index)
                return True
        return False

    def set_name(self, name: str) -> None:
        """Set the file name shown in the dialog."""
        if name is None:
            raise ValueError("name must not be None")
        self.name = name

    def ensure_extension(self) -> bool:
        """Fit the name's extension to the active format; report a change."""
        new_name = with_extension(self.name, self.format)
        changed = new_name != self.name
        self.name = new_name
        return changed

    def accept(self, folder: Union[str, Path]) -> Path:
        """Accept the dialog in ``folder`` and return the chosen path.

        When saving, the extension is fitted first; if that turns the name
        into one of an existing file, FileExistsError is raised so that the
        overwrite can be confirmed, and accepting again goes through.
        """
        folder = Path(folder)
        if self.action is ChooserAction.SAVE and self.ensure_extension():
            candidate = folder / self.name
            if candidate.exists():
                raise FileExistsError(str(candidate))
        _last_folders[self.action] = folder
        self.folder = folder
        if self.action is ChooserAction.SELECT_FOLDER:
            return folder
        return folder / self.name