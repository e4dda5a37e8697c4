"""The open document: its file name, format, title and saved state."""

from __future__ import annotations

import os
from enum import Enum
from typing import Callable, Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from .formats import UNTITLED, ImageFormat, available_formats, strip_known_suffix
from .image import PaintImage

APP_NAME = "paintkit"


class SaveChoice(Enum):
    """Answers to the question whether unsaved changes should be saved."""

    SAVE = "save"
    DISCARD = "discard"
    CANCEL = "cancel"


class DocumentError(Exception):
    """A file could not be loaded or saved."""

    def __init__(self, message: str, detail: str = "unknown error") -> None:
        super().__init__(f"{message}: {detail}")
        self.message = message
        self.detail = detail


AskSave = Callable[[str], SaveChoice]


def _format_named(name: Optional[str]) -> Optional[ImageFormat]:
    if not name:
        return None
    wanted = name.lower()
    return next((fmt for fmt in available_formats() if fmt.name == wanted), None)


class Document:
    """An image being edited together with where and how it is stored."""

    def __init__(self, image: PaintImage) -> None:
        self.image = image
        self.filename: Optional[str] = None
        self.format_name: Optional[str] = None
        self.title = UNTITLED
        self.saved = True
        self.untitled = True

    def __repr__(self) -> str:
        return f"Document(title={self.title!r}, saved={self.saved})"

    def window_title(self) -> str:
        """Title for the main window, starred while changes are unsaved."""
        title = f"{self.title} - {APP_NAME}"
        return title if self.saved else f"*{title}"

    def mark_unsaved(self) -> None:
        """Record that the image has changed since it was last saved."""
        self.saved = False

    def mark_saved(self) -> None:
        """Record that the image matches what is stored."""
        self.saved = True

    def _set_untitled(self) -> None:
        self.untitled = True
        self.title = UNTITLED

    def confirm_close(self, ask: AskSave) -> bool:
        """Offer to save unsaved changes; return True if closing is cancelled.

        ``ask`` receives the document title and answers with a SaveChoice.
        It is not consulted when there is nothing to save.
        """
        if self.saved:
            return False
        choice = SaveChoice(ask(self.title))
        if choice is SaveChoice.SAVE:
            self.save()
            return not self.saved
        return choice is SaveChoice.CANCEL

    def open(self, filename: str, ask: AskSave) -> bool:
        """Load ``filename`` into the document.

        Unsaved changes are offered for saving first; returns False when the
        user cancels. A file in a format that cannot be written back leaves
        the document untitled and unsaved.
        """
        basename = os.path.basename(filename)
        try:
            with Image.open(filename) as picture:
                picture.load()
                format_id = picture.format
                has_alpha = "A" in picture.getbands() or "transparency" in picture.info
                oriented = ImageOps.exif_transpose(picture)
                loaded = PaintImage.from_pil(oriented, has_alpha)
        except (OSError, ValueError, SyntaxError, UnidentifiedImageError) as exc:
            raise DocumentError(f'Error loading file "{basename}"', str(exc)) from exc

        if self.confirm_close(ask):
            return False

        self.image = loaded
        fmt = _format_named(format_id)
        if fmt is not None and fmt.writable:
            self.untitled = False
            self.saved = True
            self.format_name = fmt.name
            self.filename = filename
            self.title = basename
        else:
            self.saved = False
            self._set_untitled()
        return True

    def _write(self, filename: str, format_name: str) -> None:
        basename = os.path.basename(filename)
        message = f'Error saving file "{basename}"'
        if not format_name:
            raise DocumentError(message, "no file format given")
        picture = self.image.to_pil()
        try:
            picture.save(filename, format=format_name.upper())
        except KeyError as exc:
            raise DocumentError(message, f"unknown file format {format_name!r}") from exc
        except (OSError, ValueError) as exc:
            raise DocumentError(message, str(exc)) from exc

    def save(self) -> None:
        """Write the image back to its file in its format."""
        if self.untitled or self.filename is None or self.format_name is None:
            raise DocumentError(f'Error saving file "{self.title}"', "the document has no file name")
        self._write(self.filename, self.format_name)
        self.saved = True

    def save_as(self, filename: str, format_name: str) -> None:
        """Write the image to ``filename`` in ``format_name`` and adopt that file."""
        self._write(filename, format_name)
        self.untitled = False
        self.saved = True
        self.filename = filename
        self.format_name = format_name.lower()
        self.title = strip_known_suffix(os.path.basename(filename))