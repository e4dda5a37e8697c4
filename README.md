# paintkit

The editing core of a simple raster paint program, built on Pillow.

## Installation

```
pip install paintkit
```

## Modules

### `paintkit.geometry`

- `Rect(x, y, width, height)` is a frozen dataclass.
- `PointArray` is a growable list of integer points. It supports `len`, iteration and indexing. Assigning to an index outside the array raises `IndexError`. It also has `append(x, y)`, `clear()`, `offset(dx, dy)` and `copy()`.
- `clipbox(pixel_width=0, limit=None)` returns the box around all points, widened by half the pen width. If `limit` is given, the box is clamped to that `Rect`. An empty array gives `Rect(0, 0, 0, 0)`.

### `paintkit.colors`

These functions pack and unpack colours.

- `pack_rgb(r, g, b)` returns `0xRRGGBB`.
- `pack_rgba(r, g, b, a)` returns `0xRRGGBBAA`.
- `unpack_rgba(color)` returns the four components.
- `red`, `green`, `blue` and `alpha` each return one component.

### `paintkit.fill`

These functions work only on RGBA Pillow images. They raise `ValueError` for any other mode.

- `get_pixel(picture, x, y)` and `set_pixel(picture, x, y, color)` read and write one pixel as a packed `0xRRGGBBAA` value.
- `flood_fill(picture, x, y, color)` is a scan-line seed fill. It works in place and fills the 4-connected area whose pixels equal the seed pixel's RGBA value. It returns the bounding `Rect` of the filled pixels.
- Nothing is filled if the new colour has the same red, green and blue as the seed.

### `paintkit.image`

`PaintImage` wraps an RGB or RGBA picture.

Ways to create one:

- `PaintImage.new(width, height, has_alpha)`
- `PaintImage.from_pil(picture, has_alpha)`
- `PaintImage.from_data(png_bytes)`
- `PaintImage.from_region(source, rect, has_alpha)`, which copies a rectangle of a source read as opaque colour

Ways to get the picture back out:

- `to_data()` encodes the image as PNG.
- `to_pil()` returns a copy of the picture.

Properties: `width`, `height` and `has_alpha`.

Editing operations:

- `set_mask(mask)` clears the pixels where the mask is zero.
- `set_diff(source, x_offset, y_offset)` keeps only the pixels that differ from the source at that offset.
- `mask()` returns a 1-bit mask of the fully opaque pixels, or `None` when the image has no alpha.
- `make_color_transparent(r, g, b, a)` sets alpha `a` on every pixel of that colour. It needs alpha.
- `invert_colors()` inverts red, green and blue and leaves alpha alone. It needs alpha.
- `rotate(angle)` takes a `Rotation` in steps of 90°, counterclockwise.
- `flip(horizontal)` mirrors the image.
- `draw(target, x, y, width, height)` pastes the image onto another picture and scales it when a size other than `-1` is given.

### `paintkit.units`

`Unit` has the values `INCH`, `CM` and `PIXEL`.

- `to_pixels(value, unit, dpi)` converts a length to pixels.
- `convert_units(value, source, target, dpi)` converts between units. When the target is pixels, 0.5 is added so that truncating the result rounds it.
- `format_size(value, unit)` gives two decimals, or whole pixels for `PIXEL`.
- `parse_number(text)` reads the leading number, or returns `0.0` if there is none.
- `accepts_character(char)` refuses printable characters other than digits and `.`.
- `resize_target(width, height, unit, xdpi, ydpi, current)` returns the new pixel size. It returns `None` when either side is not strictly between 0 and 2000, or when the size equals `current`.
- `apply_effect(image, effect, rotation)` returns a flipped or rotated copy. `Effect` has the values `FLIP_VERTICAL`, `FLIP_HORIZONTAL` and `ROTATE`.

### `paintkit.formats`

Format lookup:

- `available_formats()` lists the `ImageFormat`s that Pillow registers.
- `format_by_suffix(suffix)` finds a format by suffix, ignoring case.

File-name helpers:

- `suffix_from_basename(name)`
- `strip_known_suffix(name)`
- `with_extension(name, fmt)`

Filters:

- `build_filters(savable)` builds one `FileFilter` per format.
- When `savable` is false, an "All Images" filter comes first.
- When `savable` is true, only writable formats are included.

`ChooserState(action)` holds the state of an open, save or folder chooser (`ChooserAction`). It tracks the file name, the filters, the active format and the folder.

- The starting folder is the folder last accepted for that action. Otherwise it is `$XDG_PICTURES_DIR` or `~/Pictures`.
- It has `select_format(extension)`, `set_name(name)` and `ensure_extension()`.
- `accept(folder)` returns the chosen path. When saving, it raises `FileExistsError` if fitting the extension turns the name into that of an existing file. Accepting again goes through.

### `paintkit.document`

`Document(image)` tracks the file name, format name, title and saved state of the image being edited.

- `window_title()` returns `"title - paintkit"`, prefixed with `*` while there are unsaved changes.
- `mark_saved()` and `mark_unsaved()` set the saved state.
- `confirm_close(ask)` calls `ask(title)`, which must answer with a `SaveChoice`. It returns `True` when closing is cancelled.
- `open(filename, ask)` loads a file and applies its EXIF orientation. A file in a format that cannot be written back leaves the document untitled and unsaved.
- `save()` writes the image back to its file. It raises an error for an untitled document.
- `save_as(filename, format_name)` writes the image to a new file and adopts that file.
- Load and save failures raise `DocumentError`, which carries `message` and `detail`.

## Example

```python
from PIL import Image

from paintkit.colors import pack_rgba
from paintkit.fill import flood_fill
from paintkit.image import PaintImage, Rotation

picture = Image.new("RGBA", (32, 32), (255, 255, 255, 255))
area = flood_fill(picture, 4, 4, pack_rgba(255, 0, 0, 255))

image = PaintImage.from_pil(picture, True)
image.rotate(Rotation.CLOCKWISE)
image.invert_colors()
png_bytes = image.to_data()
```

## What it does not do

paintkit is a library only. It has:

- no command and no window
- no dialogs or widgets: `ChooserState` and `Document.confirm_close` hold the logic, and the caller supplies the questions and answers
- no undo history
- no drawing tools
- no way to find the screen's resolution, so callers pass DPI values themselves

## Running the tests

```
pip install paintkit[test]
pytest
```