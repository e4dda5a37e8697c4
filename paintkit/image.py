"""An editable raster image with the effects offered by the paint tools."""

from __future__ import annotations

import io
from enum import IntEnum
from typing import Optional, Union

from PIL import Image, ImageChops, ImageOps

from .geometry import Rect

_TRANSPARENT = (0, 0, 0, 0)


class Rotation(IntEnum):
    """Rotation angles in degrees, measured counterclockwise."""

    NONE = 0
    COUNTERCLOCKWISE = 90
    UPSIDEDOWN = 180
    CLOCKWISE = 270


_TRANSPOSE = {
    Rotation.COUNTERCLOCKWISE: Image.Transpose.ROTATE_90,
    Rotation.UPSIDEDOWN: Image.Transpose.ROTATE_180,
    Rotation.CLOCKWISE: Image.Transpose.ROTATE_270,
}


def _normalise(picture: Image.Image, has_alpha: bool) -> Image.Image:
    """Bring a picture into RGB or RGBA form."""
    if picture.mode in ("RGB", "RGBA"):
        return picture.copy()
    return picture.convert("RGBA" if has_alpha else "RGB")


def _check_region(size: tuple[int, int], rect: Rect) -> None:
    width, height = size
    if rect.width <= 0 or rect.height <= 0:
        raise ValueError("region must have a positive size")
    if rect.x < 0 or rect.y < 0 or rect.x + rect.width > width or rect.y + rect.height > height:
        raise ValueError(f"region {rect} lies outside a {width}x{height} source")


class PaintImage:
    """An RGB or RGBA picture with 8 bits per sample."""

    def __init__(self, picture: Image.Image) -> None:
        if picture.mode not in ("RGB", "RGBA"):
            raise ValueError(f"picture must be RGB or RGBA, not {picture.mode}")
        self._picture = picture

    def __repr__(self) -> str:
        return f"PaintImage({self.width}x{self.height}, has_alpha={self.has_alpha})"

    # construction ---------------------------------------------------------

    @classmethod
    def new(cls, width: int, height: int, has_alpha: bool = False) -> "PaintImage":
        """Create a blank image of the given size."""
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        if has_alpha:
            return cls(Image.new("RGBA", (width, height), _TRANSPARENT))
        return cls(Image.new("RGB", (width, height), (0, 0, 0)))

    @classmethod
    def from_pil(cls, picture: Image.Image, has_alpha: bool = True) -> "PaintImage":
        """Create an image holding a copy of ``picture``.

        RGB and RGBA pictures keep their own mode; others are converted,
        to RGBA when ``has_alpha`` is true and to RGB otherwise.
        """
        return cls(_normalise(picture, has_alpha))

    @classmethod
    def from_data(cls, data: bytes) -> "PaintImage":
        """Decode an image from encoded file data such as PNG bytes."""
        try:
            with Image.open(io.BytesIO(data)) as decoded:
                decoded.load()
                has_alpha = "A" in decoded.getbands() or "transparency" in decoded.info
                picture = _normalise(decoded, has_alpha)
        except (OSError, ValueError, SyntaxError) as exc:
            raise ValueError(f"cannot decode image data: {exc}") from exc
        return cls(picture)

    @classmethod
    def from_region(
        cls, source: Image.Image, rect: Optional[Rect] = None, has_alpha: bool = False
    ) -> "PaintImage":
        """Copy a rectangle of ``source``; the whole of it when ``rect`` is None.

        The source is read as opaque colour, as a drawing surface would be.
        """
        if rect is None:
            rect = Rect(0, 0, source.width, source.height)
        _check_region(source.size, rect)
        region = source.convert("RGB").crop(
            (rect.x, rect.y, rect.x + rect.width, rect.y + rect.height)
        )
        return cls(region.convert("RGBA") if has_alpha else region)

    # conversion -----------------------------------------------------------

    def to_data(self) -> bytes:
        """Encode the image as PNG."""
        buffer = io.BytesIO()
        self._picture.save(buffer, format="PNG")
        return buffer.getvalue()

    def to_pil(self) -> Image.Image:
        """Return a copy of the picture."""
        return self._picture.copy()

    @property
    def width(self) -> int:
        return self._picture.width

    @property
    def height(self) -> int:
        return self._picture.height

    @property
    def has_alpha(self) -> bool:
        return self._picture.mode == "RGBA"

    def copy(self) -> "PaintImage":
        """Return an independent copy."""
        return PaintImage(self._picture.copy())

    # masking --------------------------------------------------------------

    def _ensure_alpha(self) -> None:
        if not self.has_alpha:
            self._picture = self._picture.convert("RGBA")

    def _clear_where(self, keep: Image.Image) -> None:
        """Make every pixel transparent black where ``keep`` is zero."""
        keep = keep.point(lambda v: 255 if v else 0)
        blank = Image.new("RGBA", self._picture.size, _TRANSPARENT)
        self._picture = Image.composite(self._picture, blank, keep)

    def set_mask(self, mask: Image.Image) -> None:
        """Clear the pixels whose mask value is zero, adding alpha if needed.

        The first band of ``mask`` decides; it must match the image size.
        """
        if mask.size != self._picture.size:
            raise ValueError("mask size does not match image size")
        self._ensure_alpha()
        self._clear_where(mask.convert("RGBA").getchannel("R"))

    def set_diff(self, source: Image.Image, x_offset: int, y_offset: int) -> None:
        """Clear the pixels equal to the opaque source area at the offset.

        What stays is only what differs from ``source``.
        """
        if x_offset < 0 or y_offset < 0:
            raise ValueError("offsets must not be negative")
        _check_region(source.size, Rect(x_offset, y_offset, self.width, self.height))
        self._ensure_alpha()
        region = (
            source.convert("RGB")
            .crop((x_offset, y_offset, x_offset + self.width, y_offset + self.height))
            .convert("RGBA")
        )
        diff = ImageChops.difference(self._picture, region)
        bands = diff.split()
        changed = bands[0]
        for band in bands[1:]:
            changed = ImageChops.lighter(changed, band)
        self._clear_where(changed)

    def mask(self) -> Optional[Image.Image]:
        """Return a 1-bit mask set where the pixel is fully opaque.

        An image without alpha has no mask and gives None.
        """
        if not self.has_alpha:
            return None
        return self._picture.getchannel("A").point(lambda v: 255 if v >= 255 else 0).convert("1")

    # drawing --------------------------------------------------------------

    def draw(
        self, target: Image.Image, x: int = 0, y: int = 0, width: int = -1, height: int = -1
    ) -> None:
        """Draw the image onto ``target`` at ``(x, y)``, scaled if a size is given.

        A width or height of -1 keeps the image's own.
        """
        w = self.width if width == -1 else width
        h = self.height if height == -1 else height
        if w <= 0 or h <= 0:
            raise ValueError("draw size must be positive")
        picture = self._picture
        if (w, h) != picture.size:
            picture = picture.resize((w, h), Image.Resampling.LANCZOS)

        if picture.mode == "RGBA":
            if target.mode == "RGBA":
                layer = Image.new("RGBA", target.size, _TRANSPARENT)
                layer.paste(picture, (x, y))
                target.paste(Image.alpha_composite(target, layer))
            else:
                target.paste(picture.convert(target.mode), (x, y), picture.getchannel("A"))
        else:
            if picture.mode != target.mode:
                picture = picture.convert(target.mode)
            target.paste(picture, (x, y))

    # effects --------------------------------------------------------------

    def _require_alpha(self) -> None:
        if not self.has_alpha:
            raise ValueError("operation needs an image with alpha")

    def make_color_transparent(self, r: int, g: int, b: int, a: int) -> None:
        """Give alpha ``a`` to every pixel of colour ``(r, g, b)``."""
        self._require_alpha()
        target = (r, g, b)
        self._picture.putdata(
            [(pr, pg, pb, a) if (pr, pg, pb) == target else (pr, pg, pb, pa)
             for pr, pg, pb, pa in self._picture.getdata()]
        )

    def invert_colors(self) -> None:
        """Invert red, green and blue, leaving alpha untouched."""
        self._require_alpha()
        alpha = self._picture.getchannel("A")
        inverted = ImageOps.invert(self._picture.convert("RGB"))
        inverted.putalpha(alpha)
        self._picture = inverted

    def rotate(self, angle: Union[Rotation, int]) -> None:
        """Rotate counterclockwise by a multiple of 90 degrees."""
        rotation = Rotation(angle)
        if rotation is Rotation.NONE:
            return
        self._picture = self._picture.transpose(_TRANSPOSE[rotation])

    def flip(self, horizontal: bool) -> None:
        """Mirror left to right when ``horizontal``, otherwise top to bottom."""
        method = Image.Transpose.FLIP_LEFT_RIGHT if horizontal else Image.Transpose.FLIP_TOP_BOTTOM
        self._picture = self._picture.transpose(method)