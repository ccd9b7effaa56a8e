"""Decoded taxi sign model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class SignColorMode(Enum):
    """
    Colour directives of the taxi-sign mini-language.

    The value is the directive letter used in apt.dat sign text
    (``{@Y}``, ``{@R}``, ``{@L}``, ``{@B}``).
    """
    DIRECTION = "Y"   # black text on yellow
    MANDATORY = "R"   # white text on red
    LOCATION = "L"    # yellow text on black
    DISTANCE = "B"    # white text on black (distance remaining)

    @classmethod
    def from_letter(cls, letter: str) -> Optional['SignColorMode']:
        try:
            return cls(letter)
        except ValueError:
            return None


@dataclass(frozen=True)
class SignSegment:
    """A run of sign text rendered with a single colour mode."""

    color_mode: SignColorMode
    text: str


@dataclass
class ParsedSign:
    front: List[SignSegment] = field(default_factory=list)
    back: List[SignSegment] = field(default_factory=list)

    @property
    def has_back(self) -> bool:
        return len(self.back) > 0
