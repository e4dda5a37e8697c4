import pytest
from PIL import Image

from paintkit.image import PaintImage, Rotation
from paintkit.units import (
    Effect,
    Unit,
    accepts_character,
    apply_effect,
    convert_units,
    format_size,
    parse_number,
    resize_target,
    to_pixels,
)


@pytest.mark.parametrize("unit", list(Unit))
def test_same_unit_is_unchanged(unit):
    assert convert_units(3.25, unit, unit, 96) == 3.25


@pytest.mark.parametrize("unit", [Unit.INCH, Unit.CM])
@pytest.mark.parametrize("dpi", [72, 96, 120])
def test_pixels_round_trip(unit, dpi):
    value = 240.0
    converted = convert_units(value, Unit.PIXEL, unit, dpi)
    assert to_pixels(converted, unit, dpi) == pytest.approx(value)


def test_inch_cm_round_trip():
    there = convert_units(4.0, Unit.INCH, Unit.CM, 96)
    back = convert_units(there, Unit.CM, Unit.INCH, 96)
    assert back == pytest.approx(4.0)


def test_to_pixel_adds_half_for_rounding():
    exact = to_pixels(1.3, Unit.INCH, 96)
    assert convert_units(1.3, Unit.INCH, Unit.PIXEL, 96) == pytest.approx(exact + 0.5)


def test_pixel_to_pixel_via_to_pixels_is_identity():
    assert to_pixels(37, Unit.PIXEL, 96) == 37


def test_bad_dpi_raises():
    with pytest.raises(ValueError):
        convert_units(10, Unit.PIXEL, Unit.INCH, 0)


def test_parse_number_prefix():
    assert parse_number("12abc") == 12.0
    assert parse_number("  3.5") == 3.5


def test_parse_number_without_number():
    assert parse_number("abc") == 0.0


@pytest.mark.parametrize("char", list("0123456789."))
def test_accepts_digits_and_period(char):
    assert accepts_character(char) is True


@pytest.mark.parametrize("char", ["a", "Z", " ", "-", ","])
def test_refuses_other_printables(char):
    assert accepts_character(char) is False


def test_accepts_control_characters():
    assert accepts_character("\b") is True
    assert accepts_character("") is True


def test_format_size():
    assert format_size(2.5, Unit.INCH) == "2.50"
    assert format_size(12.9, Unit.PIXEL) == "12"


def test_resize_in_pixels():
    assert resize_target(100, 50, Unit.PIXEL, 96, 96, (10, 10)) == (100, 50)


def test_resize_same_size_is_none():
    assert resize_target(10, 10, Unit.PIXEL, 96, 96, (10, 10)) is None


@pytest.mark.parametrize("size", [(2000, 10), (10, 2000), (0, 10), (10, -5)])
def test_resize_out_of_range_is_none(size):
    assert resize_target(size[0], size[1], Unit.PIXEL, 96, 96, (10, 10)) is None


def test_resize_in_inches_uses_both_dpis():
    expected = (int(to_pixels(2, Unit.INCH, 96)), int(to_pixels(1, Unit.INCH, 72)))
    assert resize_target(2, 1, Unit.INCH, 96, 72, (10, 10)) == expected


def _two_pixels():
    picture = Image.new("RGB", (2, 1))
    picture.putpixel((0, 0), (255, 0, 0))
    picture.putpixel((1, 0), (0, 0, 255))
    return PaintImage.from_pil(picture)


def test_flip_horizontal_swaps_pixels():
    image = _two_pixels()
    result = apply_effect(image, Effect.FLIP_HORIZONTAL)
    flipped = result.to_pil()
    original = image.to_pil()
    assert flipped.getpixel((0, 0)) == original.getpixel((1, 0))
    assert flipped.getpixel((1, 0)) == original.getpixel((0, 0))


def test_flip_vertical_keeps_single_row():
    image = _two_pixels()
    result = apply_effect(image, Effect.FLIP_VERTICAL)
    assert list(result.to_pil().getdata()) == list(image.to_pil().getdata())


def test_rotate_swaps_dimensions_and_leaves_input():
    image = _two_pixels()
    result = apply_effect(image, Effect.ROTATE, Rotation.CLOCKWISE)
    assert (result.width, result.height) == (image.height, image.width)
    assert (image.width, image.height) == (2, 1)


def test_rotate_upside_down_twice_is_identity():
    image = _two_pixels()
    once = apply_effect(image, Effect.ROTATE, Rotation.UPSIDEDOWN)
    twice = apply_effect(once, Effect.ROTATE, Rotation.UPSIDEDOWN)
    assert list(twice.to_pil().getdata()) == list(image.to_pil().getdata())


def test_unknown_effect_raises():
    with pytest.raises(ValueError):
        apply_effect(_two_pixels(), 7)