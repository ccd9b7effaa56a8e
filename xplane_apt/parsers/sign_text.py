"""
Decoder for the apt.dat taxi-sign mini-language (row 20 text).

Grammar summary:
    {@Y} {@R} {@L} {@B}   switch colour mode (direction, mandatory,
                          location, distance); bare @Y etc. are equivalent
    {@@} or @@            separates the front face from the back face
    {^r} {r1} {hazard}    glyph codes, see GLYPHS
    ^lu ^r                bare arrow codes, two letters before one
    _  *  |               space, middle dot, divider

A face written entirely as ``{@Y,^l,C}`` is the comma shorthand of a single
directive followed by its parts.

Example:
    sign = parse_sign_text("{@L}B6{@Y}C2{^r}")
    # sign.front == [SignSegment(LOCATION, "B6"), SignSegment(DIRECTION, "C2→")]
"""

import re
import logging
from typing import Dict, List, Optional, Tuple

from xplane_apt.models.airport import ParsedAirport, Sign
from xplane_apt.models.sign import ParsedSign, SignColorMode, SignSegment

logger = logging.getLogger(__name__)

GLYPHS: Dict[str, str] = {
    '^u': '↑',
    '^d': '↓',
    '^l': '←',
    '^r': '→',
    '^lu': '↖',
    '^ru': '↗',
    '^ld': '↙',
    '^rd': '↘',
    'r1': 'Ⅰ',
    'r2': 'Ⅱ',
    'r3': 'Ⅲ',
    'no-entry': '⊘',
    'critical': '◈',
    'safety': '▣',
    'hazard': '⚠',
    'comma': ',',
}

# bare ^ codes, longest first
ARROW_CODES = sorted((code for code in GLYPHS if code.startswith('^')), key=len, reverse=True)

CHARACTER_SUBSTITUTIONS = {
    '_': ' ',
    '*': '·',
    '|': '|',
}

DEFAULT_COLOR_MODE = SignColorMode.LOCATION
FACE_SEPARATOR = '{@@}'
BARE_FACE_SEPARATOR = '@@'

_COMMA_FORM = re.compile(r'^\{@([YRLB]),(.+)\}$')
_CACHE_KEY = re.compile(r'^sign-(\d+)-(.*)$')


def split_faces(raw_text: str) -> Tuple[str, str]:
    """Split sign text into (front, back); back is empty for single-faced signs."""
    index = raw_text.find(FACE_SEPARATOR)
    if index != -1:
        return raw_text[:index], raw_text[index + len(FACE_SEPARATOR):]
    index = raw_text.find(BARE_FACE_SEPARATOR)
    if index != -1:
        return raw_text[:index], raw_text[index + len(BARE_FACE_SEPARATOR):]
    return raw_text, ''


class SignTextScanner:
    """
    Scan one sign face into colour segments.

    The scanner walks the text once, left to right, accumulating plain
    characters into the current segment and closing it whenever a colour
    directive switches mode.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.mode = DEFAULT_COLOR_MODE
        self.buffer: List[str] = []
        self.segments: List[SignSegment] = []

    def scan(self) -> List[SignSegment]:
        while self.pos < len(self.text):
            char = self.text[self.pos]
            if char == '{':
                if not self._bracket():
                    # unterminated brace, keep the rest verbatim
                    self.buffer.append(self.text[self.pos:])
                    break
            elif char == '@' and self._directive(self.text[self.pos + 1:self.pos + 2]):
                self.pos += 2
            elif char == '^' and self._arrow():
                continue
            else:
                self.buffer.append(CHARACTER_SUBSTITUTIONS.get(char, char))
                self.pos += 1
        self._flush()
        return self.segments

    def _bracket(self) -> bool:
        close = self.text.find('}', self.pos)
        if close == -1:
            return False
        content = self.text[self.pos + 1:close]
        self.pos = close + 1

        if len(content) == 2 and content[0] == '@':
            if not self._directive(content[1]):
                logger.debug(f"Ignoring unknown sign directive '{{{content}}}'")
        elif content in GLYPHS:
            self.buffer.append(GLYPHS[content])
        else:
            logger.debug(f"Ignoring unknown sign code '{{{content}}}'")
        return True

    def _directive(self, letter: str) -> bool:
        mode = SignColorMode.from_letter(letter) if letter else None
        if mode is None:
            return False
        self._flush()
        self.mode = mode
        return True

    def _arrow(self) -> bool:
        for code in ARROW_CODES:
            if self.text.startswith(code, self.pos):
                self.buffer.append(GLYPHS[code])
                self.pos += len(code)
                return True
        return False

    def _flush(self) -> None:
        if self.buffer:
            self.segments.append(SignSegment(self.mode, ''.join(self.buffer)))
            self.buffer = []


def parse_comma_delimited(mode: SignColorMode, content: str) -> List[SignSegment]:
    """Decode the parts of a ``{@Y,^l,C}`` face into a single segment."""
    text = ''
    for part in content.split(','):
        part = part.strip()
        if part in GLYPHS:
            text += GLYPHS[part]
        elif part in CHARACTER_SUBSTITUTIONS:
            text += CHARACTER_SUBSTITUTIONS[part]
        else:
            text += part
    return [SignSegment(mode, text)] if text else []


def parse_sign_face(text: str) -> List[SignSegment]:
    match = _COMMA_FORM.match(text)
    if match:
        return parse_comma_delimited(SignColorMode(match.group(1)), match.group(2))
    return SignTextScanner(text).scan()


def parse_sign_text(raw_text: str) -> ParsedSign:
    """
    Decode row 20 sign text into front and back segments.

    Args:
        raw_text: Sign text as found in apt.dat

    Returns:
        ParsedSign; ``back`` is empty when the sign has a single face
    """
    front, back = split_faces(raw_text)
    return ParsedSign(
        front=parse_sign_face(front),
        back=parse_sign_face(back) if back else [],
    )


def decode_airport_signs(airport: ParsedAirport) -> List[Tuple[Sign, ParsedSign]]:
    """Pair every sign of an airport with its decoded faces."""
    return [(sign, parse_sign_text(sign.text)) for sign in airport.signs]


def _escape(text: str) -> str:
    return text.replace('\\', '\\\\').replace(',', '\\,')


def _split_escaped(encoded: str) -> List[str]:
    parts = []
    current = []
    chars = iter(encoded)
    for char in chars:
        if char == '\\':
            current.append(next(chars, ''))
        elif char == ',':
            parts.append(''.join(current))
            current = []
        else:
            current.append(char)
    parts.append(''.join(current))
    return parts


def generate_sign_cache_key(segments: List[SignSegment], size: int) -> str:
    """
    Build a key identifying a rendered sign, e.g. ``sign-2-L:B6,Y:C2→``.

    Commas and backslashes in segment text are escaped so that
    decode_sign_cache_key restores the segments exactly.
    """
    encoded = ','.join(f"{segment.color_mode.value}:{_escape(segment.text)}" for segment in segments)
    return f"sign-{size}-{encoded}"


def decode_sign_cache_key(key: str) -> Optional[Tuple[List[SignSegment], int]]:
    """Reverse generate_sign_cache_key; None when the key is not a sign key."""
    match = _CACHE_KEY.match(key)
    if not match:
        return None

    size = int(match.group(1))
    encoded = match.group(2)
    if not encoded:
        return [], size

    segments = []
    for part in _split_escaped(encoded):
        letter, _, text = part.partition(':')
        mode = SignColorMode.from_letter(letter)
        if mode is None:
            return None
        segments.append(SignSegment(mode, text))
    return segments, size
