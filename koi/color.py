"""Display color mapping for the renderer.

Converts an expressed color gene plus the lightness gene into CSS ``hsla()``
strings. These are pure functions; breeding never calls them.

Design Note:
    The lightness gene is applied as an offset from the standard shade (50)
    on top of the gene's own lightness, so a dark gene stays darker than a
    light one at the same offset. White ignores the lightness gene.
"""

import colorsys
from typing import Tuple

from koi.genetics.catalog import GeneId, display_hex

DISPLAY_LIGHTNESS_MIN = 5.0
DISPLAY_LIGHTNESS_MAX = 95.0
SPINE_DARKEN = 20.0
SPINE_ALPHA = 0.3


def hex_to_hsl(hex_color: str) -> Tuple[int, float, float]:
    """Convert ``#RGB`` or ``#RRGGBB`` to (hue degrees, saturation %, lightness %).

    Malformed input maps to black.

    Example:
        >>> hex_to_hsl("#FF0000")
        (0, 100.0, 50.0)
    """
    digits = hex_color.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    r = g = b = 0.0
    if len(digits) == 6:
        try:
            r, g, b = (int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))
        except ValueError:
            r = g = b = 0.0

    h, light, sat = colorsys.rgb_to_hls(r, g, b)
    return round(h * 360) % 360, round(sat * 100, 1), round(light * 100, 1)


def _hsla(h: float, s: float, light: float, alpha: float) -> str:
    return f"hsla({h:g}, {s:g}%, {light:g}%, {alpha:g})"


def display_color(phenotype: GeneId, lightness: float) -> str:
    """Body color for an expressed gene and lightness gene."""
    h, s, base_l = hex_to_hsl(display_hex(phenotype))
    if phenotype is GeneId.WHITE:
        return _hsla(h, s, base_l, 1)
    offset = lightness - 50
    final_l = max(DISPLAY_LIGHTNESS_MIN, min(DISPLAY_LIGHTNESS_MAX, base_l + offset))
    return _hsla(h, s, round(final_l, 1), 1)


def spine_color(phenotype: GeneId, lightness: float) -> str:
    """Translucent darker stripe drawn along the back."""
    h, s, base_l = hex_to_hsl(display_hex(phenotype))
    level = base_l if phenotype is GeneId.WHITE else lightness
    return _hsla(h, s, round(max(0.0, level - SPINE_DARKEN), 1), SPINE_ALPHA)
