"""
Sign rendering configuration.

Adjust ``SIGN_CONFIG['scale']`` to resize every sign proportionally; the other
base values fine-tune individual dimensions.
"""

from dataclasses import dataclass
from typing import Dict, Union

from xplane_apt.models.enums import SignSize
from xplane_apt.models.sign import SignColorMode

SIGN_CONFIG = {
    'scale': 1.0,
    'base_font_size': 14,
    'base_padding': 4,
    'base_border_width': 2,
    'base_char_width': 9,
    'size_multipliers': {
        SignSize.SMALL: 0.75,
        SignSize.MEDIUM: 1.0,
        SignSize.LARGE: 1.3,
        SignSize.LARGE_DISTANCE_REMAINING: 1.3,
        SignSize.SMALL_DISTANCE_REMAINING: 0.75,
    },
}

# background, text and border colours per X-Plane taxi-sign specification
SIGN_COLORS: Dict[SignColorMode, Dict[str, str]] = {
    SignColorMode.DIRECTION: {'bg': '#FFCC00', 'text': '#000000', 'border': '#000000'},
    SignColorMode.MANDATORY: {'bg': '#CC0000', 'text': '#FFFFFF', 'border': '#000000'},
    SignColorMode.LOCATION: {'bg': '#000000', 'text': '#FFCC00', 'border': '#FFCC00'},
    SignColorMode.DISTANCE: {'bg': '#000000', 'text': '#FFFFFF', 'border': '#FFFFFF'},
}


@dataclass(frozen=True)
class SignDimensions:
    font_size: int
    padding: int
    border_width: int
    char_width: int
    height: int


def _round(value: float) -> int:
    # half-up, as pixel sizes were historically computed
    return int(value + 0.5)


def get_sign_dimensions(size: Union[SignSize, int]) -> SignDimensions:
    """
    Compute pixel dimensions for a sign size code.

    Unknown size codes use the medium multiplier.
    """
    multiplier = SIGN_CONFIG['size_multipliers'].get(size, 1.0)
    scale = SIGN_CONFIG['scale']

    font_size = _round(SIGN_CONFIG['base_font_size'] * multiplier * scale)
    padding = _round(SIGN_CONFIG['base_padding'] * multiplier * scale)
    border_width = _round(SIGN_CONFIG['base_border_width'] * scale)
    char_width = _round(SIGN_CONFIG['base_char_width'] * multiplier * scale)
    height = font_size + padding * 2 + border_width * 2

    return SignDimensions(
        font_size=font_size,
        padding=padding,
        border_width=border_width,
        char_width=char_width,
        height=height,
    )
