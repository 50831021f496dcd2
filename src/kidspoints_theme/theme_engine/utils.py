"""Utility functions for theme engine operations.

This module provides color conversion between hex, RGB and HSL, WCAG
luminance and contrast calculation, brightness/saturation adjustment and
contrasting text selection for the theming system.
"""

import colorsys
import math
import re
from typing import Tuple, Optional, Dict, List, Union

from .schema import ColorValue, ContrastingText, TextPath, WCAGLevel


WCAG_AA_RATIO = 4.5
WCAG_AAA_RATIO = 7.0

# Backgrounds brighter than this read better with black text
BLACK_TEXT_LUMINANCE_THRESHOLD = 0.179

LIGHT_TEXT_CANDIDATES = ('#FFFFFF', '#FAFAFA', '#F5F5F5')
DARK_TEXT_CANDIDATES = ('#000000', '#111111', '#1A1A1A')

VARIATION_STEPS = (
    (50, 45),
    (100, 35),
    (200, 25),
    (300, 15),
    (400, 5),
    (500, 0),
    (600, -5),
    (700, -15),
    (800, -25),
    (900, -35),
)

_HEX_RE = re.compile(r'#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})', re.IGNORECASE)

RGB = Tuple[int, int, int]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))


def hex_to_rgb(hex_color: str) -> Optional[RGB]:
    """Convert hex color to RGB tuple.

    Args:
        hex_color: Hex color string (e.g., '#FF0000' or 'ff0000')

    Returns:
        RGB tuple (r, g, b) with values 0-255, or None if the string is
        not a 6-digit hex color
    """
    if not isinstance(hex_color, str):
        return None

    match = _HEX_RE.fullmatch(hex_color)
    if not match:
        return None

    return tuple(int(part, 16) for part in match.groups())


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB values to an uppercase hex color string.

    Args:
        r, g, b: RGB values 0-255 (masked to 8 bits)

    Returns:
        Hex color string with # prefix
    """
    value = ((int(r) & 0xFF) << 16) | ((int(g) & 0xFF) << 8) | (int(b) & 0xFF)
    return f"#{value:06X}"


def rgb_to_hsl_exact(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to unrounded HSL.

    Returns:
        (hue degrees [0, 360), saturation percent, lightness percent)
    """
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    return ((h * 360) % 360, s * 100, l * 100)


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """Convert RGB to HSL rounded to whole degrees and percents.

    Args:
        r, g, b: RGB values 0-255

    Returns:
        (h, s, l) with h in [0, 360) and s, l in [0, 100]
    """
    h, s, l = rgb_to_hsl_exact(r, g, b)
    return (round_half_up(h) % 360, round_half_up(s), round_half_up(l))


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL to RGB.

    Args:
        h: Hue in degrees
        s: Saturation percent 0-100
        l: Lightness percent 0-100

    Returns:
        RGB tuple with values 0-255
    """
    channels = colorsys.hls_to_rgb((h % 360) / 360.0, l / 100.0, s / 100.0)
    return tuple(round_half_up(channel * 255) for channel in channels)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL straight to a hex string."""
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def parse_color(hex_color: str) -> Optional[ColorValue]:
    """Parse a hex string into a ColorValue carrying all three views."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return ColorValue(hex=rgb_to_hex(*rgb), rgb=rgb, hsl=rgb_to_hsl(*rgb))


def normalize_hex(hex_color: str) -> str:
    """Return the canonical '#RRGGBB' form, or the input if unparseable."""
    rgb = hex_to_rgb(hex_color)
    return rgb_to_hex(*rgb) if rgb else hex_color


def calculate_luminance(r: int, g: int, b: int) -> float:
    """Calculate relative luminance of an RGB color.

    Uses the WCAG formula for luminance calculation.

    Args:
        r, g, b: RGB values 0-255

    Returns:
        Relative luminance 0.0-1.0
    """
    def gamma_correct(value: int) -> float:
        normalized = value / 255.0
        if normalized <= 0.03928:
            return normalized / 12.92
        else:
            return ((normalized + 0.055) / 1.055) ** 2.4

    return (
        0.2126 * gamma_correct(r)
        + 0.7152 * gamma_correct(g)
        + 0.0722 * gamma_correct(b)
    )


relative_luminance = calculate_luminance


def calculate_contrast_ratio(color1: str, color2: str) -> float:
    """Calculate WCAG contrast ratio between two colors.

    Args:
        color1, color2: Hex color strings

    Returns:
        Contrast ratio 1.0-21.0 (higher is more contrast). Unparseable
        colors yield the minimal ratio 1.0.
    """
    rgb1 = hex_to_rgb(color1)
    rgb2 = hex_to_rgb(color2)

    if rgb1 is None or rgb2 is None:
        return 1.0

    lum1 = calculate_luminance(*rgb1)
    lum2 = calculate_luminance(*rgb2)

    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)

    return (lighter + 0.05) / (darker + 0.05)


contrast_ratio = calculate_contrast_ratio


def meets_wcag_contrast(fg_color: str, bg_color: str,
                        level: Union[WCAGLevel, str] = WCAGLevel.AA) -> bool:
    """Check if color combination meets WCAG contrast requirements.

    Args:
        fg_color: Foreground hex color
        bg_color: Background hex color
        level: 'AA' (4.5:1) or 'AAA' (7:1)

    Returns:
        True if contrast meets requirements
    """
    ratio = calculate_contrast_ratio(fg_color, bg_color)

    if WCAGLevel(level) == WCAGLevel.AAA:
        return ratio >= WCAG_AAA_RATIO
    else:  # AA
        return ratio >= WCAG_AA_RATIO


def meets_aa(fg_color: str, bg_color: str) -> bool:
    return meets_wcag_contrast(fg_color, bg_color, WCAGLevel.AA)


def meets_aaa(fg_color: str, bg_color: str) -> bool:
    return meets_wcag_contrast(fg_color, bg_color, WCAGLevel.AAA)


def _adjust_hsl_channel(color: str, channel: int, amount: float) -> str:
    rgb = hex_to_rgb(color)
    if rgb is None:
        return color

    hsl = list(rgb_to_hsl(*rgb))
    hsl[channel] = max(0, min(100, hsl[channel] + amount))

    return rgb_to_hex(*hsl_to_rgb(*hsl))


def adjust_brightness(color: str, amount: float) -> str:
    """Shift the lightness of a color.

    Args:
        color: Hex color
        amount: Lightness delta in percent; positive lightens

    Returns:
        Adjusted hex color, or the input unchanged if it cannot be parsed
    """
    return _adjust_hsl_channel(color, 2, amount)


def adjust_saturation(color: str, amount: float) -> str:
    """Shift the saturation of a color (same contract as adjust_brightness)."""
    return _adjust_hsl_channel(color, 1, amount)


def generate_color_variations(base_color: str) -> Dict[int, str]:
    """Build the 50..900 tint/shade ramp of a color.

    Step 500 is the base color itself; 50 is the lightest and 900 the
    darkest.
    """
    return {
        step: base_color if delta == 0 else adjust_brightness(base_color, delta)
        for step, delta in VARIATION_STEPS
    }


def select_contrasting_text(background: str) -> ContrastingText:
    """Pick a text color for a background, reporting the branch taken.

    Light candidates are tried first, then dark ones; the first reaching
    WCAG AAA wins. When none does, black or white is chosen from the
    background luminance.

    Args:
        background: Background hex color

    Returns:
        ContrastingText with the chosen color, its ratio and the path
    """
    rgb = hex_to_rgb(background)
    if rgb is None:
        return ContrastingText(color='#000000', ratio=1.0, path=TextPath.FALLBACK)

    for path, candidates in ((TextPath.LIGHT, LIGHT_TEXT_CANDIDATES),
                             (TextPath.DARK, DARK_TEXT_CANDIDATES)):
        for candidate in candidates:
            ratio = calculate_contrast_ratio(candidate, background)
            if ratio >= WCAG_AAA_RATIO:
                return ContrastingText(color=candidate, ratio=ratio, path=path)

    if calculate_luminance(*rgb) > BLACK_TEXT_LUMINANCE_THRESHOLD:
        color = '#000000'
    else:
        color = '#FFFFFF'
    return ContrastingText(
        color=color,
        ratio=calculate_contrast_ratio(color, background),
        path=TextPath.FALLBACK,
    )


def generate_contrasting_text(background: str) -> str:
    """Return a text color readable on the given background."""
    return select_contrasting_text(background).color


def average_contrast(pairs: List[Tuple[str, str]]) -> float:
    """Average contrast ratio of (foreground, background) pairs, to 0.1."""
    if not pairs:
        return 0.0
    ratios = [calculate_contrast_ratio(fg, bg) for fg, bg in pairs]
    return round_half_up(sum(ratios) / len(ratios) * 10) / 10
