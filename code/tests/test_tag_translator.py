import pytest

from TagTranslator import (
    AXES, ILLUMINATION, LIT, SURFACE, UNKNOWN, UNLIT, translate, translate_lit, translate_surface,
)


@pytest.mark.parametrize("raw, label", [
    ("paved", "Asphalt"),
    ("asphalt", "Asphalt"),
    ("concrete", "Asphalt"),
    ("concrete:plates", "Concrete plates"),
    ("cobblestone", "Sett"),
    ("sett", "Sett"),
    ("unhewn_cobblestone", "Cobblestone"),
    ("pebblestone", "Fine gravel"),
    ("ground", "Dirt"),
    ("woodchips", "Woodchips"),
])
def test_surface_labels(raw, label):
    assert translate_surface(raw) == label
    assert translate(SURFACE, raw) == label


def test_unlisted_surface_passes_through():
    assert translate(SURFACE, "metal_grid") == "metal_grid"


def test_missing_tag_is_unknown():
    for axis in AXES:
        assert translate(axis, None) == UNKNOWN


@pytest.mark.parametrize("raw", ["yes", "24/7", "automatic", "limited", ""])
def test_anything_but_no_is_lit(raw):
    assert translate(ILLUMINATION, raw) == LIT


def test_no_is_unlit():
    assert translate_lit("no") == UNLIT


def test_axis_colors():
    assert SURFACE.color("Asphalt") == "#4682B4"
    assert ILLUMINATION.color(UNLIT) == "black"
    assert SURFACE.color("metal_grid") == "gray"
    assert ILLUMINATION.color(UNKNOWN) == "gray"
