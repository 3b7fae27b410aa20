from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

UNKNOWN = "Unknown"

# https://wiki.openstreetmap.org/wiki/Key:surface
# several raw values collapse into one label, anything not listed is shown as tagged
SURFACE_LABELS: Dict[str, str] = {
    "paved": "Asphalt",
    "asphalt": "Asphalt",
    "concrete": "Asphalt",
    "concrete:lanes": "Concrete lanes",
    "concrete:plates": "Concrete plates",
    "paving_stones": "Paving stones",
    "sett": "Sett",
    "cobblestone": "Sett",
    "unhewn_cobblestone": "Cobblestone",
    "unpaved": "Unpaved",
    "compacted": "Compacted",
    "fine_gravel": "Fine gravel",
    "pebblestone": "Fine gravel",
    "gravel": "Gravel",
    "earth": "Dirt",
    "dirt": "Dirt",
    "ground": "Dirt",
    "grass": "Grass",
    "grass_paver": "Grass paver",
    "mud": "Mud",
    "sand": "Sand",
    "woodchips": "Woodchips",
}

SURFACE_COLORS: Dict[str, str] = {
    "Asphalt": "#4682B4",
    "Concrete lanes": "#ADD8E6",
    "Concrete plates": "#B0C4DE",
    "Paving stones": "#C0C0C0",
    "Sett": "#A9A9A9",
    "Cobblestone": "#808080",
    "Unpaved": "#FFA07A",
    "Compacted": "#006400",
    "Fine gravel": "#708090",
    "Gravel": "#696969",
    "Dirt": "#CD853F",
    "Grass": "#228B22",
    "Grass paver": "#8FBC8F",
    "Mud": "#BDB76B",
    "Sand": "#F4A460",
    "Woodchips": "#DEB887",
}

LIT = "Lit"
UNLIT = "Unlit"

LIT_COLORS: Dict[str, str] = {
    LIT: "yellow",
    UNLIT: "black",
}


def translate_surface(raw: str) -> str:
    return SURFACE_LABELS.get(raw, raw)


def translate_lit(raw: str) -> str:
    # lit=yes, lit=24/7, lit=sunset-sunrise ... all count as lit
    if raw == "no":
        return UNLIT
    return LIT


@dataclass(frozen=True)
class Axis:
    """
    One classification dimension of a route.
    tag: OSM tag key read from the way
    label: translation of a present raw tag value into a display category
    colors: display category -> map colour
    """
    name: str
    tag: str
    label: Callable[[str], str]
    colors: Dict[str, str]

    def color(self, category: str) -> str:
        return self.colors.get(category, "gray")


SURFACE = Axis(name="surface", tag="surface", label=translate_surface, colors=SURFACE_COLORS)
ILLUMINATION = Axis(name="lit", tag="lit", label=translate_lit, colors=LIT_COLORS)

AXES = (SURFACE, ILLUMINATION)


def translate(axis: Axis, raw: Optional[str]) -> str:
    if raw is None:
        return UNKNOWN
    return axis.label(raw)
