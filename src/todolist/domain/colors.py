"""Color helpers for theme swatches.

Colors are stored as 32-bit ARGB integers. The UI wants a family of tints
rather than a single color, so a swatch is rebuilt from the stored value by
keeping its RGB channels and stepping the opacity.
"""
from dataclasses import dataclass, field
from typing import Dict


# Conventional shade keys and the opacity each one is rendered with
SHADE_OPACITIES: Dict[int, float] = {
    50: 0.1,
    100: 0.2,
    200: 0.3,
    300: 0.4,
    400: 0.5,
    500: 0.6,
    600: 0.7,
    700: 0.8,
    800: 0.9,
    900: 1.0,
}


@dataclass(frozen=True)
class Rgba:
    """A color split into channels plus an opacity in [0, 1]."""
    red: int
    green: int
    blue: int
    opacity: float = 1.0

    @classmethod
    def from_value(cls, value: int, opacity: float = 1.0) -> 'Rgba':
        """Split an ARGB integer into channels."""
        return cls(
            red=(value >> 16) & 0xFF,
            green=(value >> 8) & 0xFF,
            blue=value & 0xFF,
            opacity=opacity,
        )

    def to_css(self) -> str:
        return f"rgba({self.red}, {self.green}, {self.blue}, {self.opacity:g})"


@dataclass(frozen=True)
class ColorSwatch:
    """A primary color and its shades keyed 50..900."""
    value: int
    shades: Dict[int, Rgba] = field(default_factory=dict)

    @property
    def primary(self) -> Rgba:
        return Rgba.from_value(self.value)

    def __getitem__(self, shade: int) -> Rgba:
        return self.shades[shade]


def material_swatch(color: int) -> ColorSwatch:
    """
    Derive the ten-shade swatch for a stored color.

    Args:
        color: ARGB integer as stored in preferences

    Returns:
        ColorSwatch whose shade k has the stored RGB and opacity SHADE_OPACITIES[k]
    """
    shades = {
        shade: Rgba.from_value(color, opacity)
        for shade, opacity in SHADE_OPACITIES.items()
    }
    return ColorSwatch(value=color, shades=shades)


def color_from_hex(hex_color: str) -> int:
    """
    Parse '#RRGGBB' (or 'RRGGBB') into an opaque ARGB integer.

    Raises:
        ValueError: If the string is not a six-digit hex color
    """
    digits = hex_color.strip().lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    return 0xFF000000 | int(digits, 16)


def color_to_hex(color: int) -> str:
    """Format the RGB part of an ARGB integer as '#RRGGBB'."""
    return f"#{color & 0xFFFFFF:06X}"
