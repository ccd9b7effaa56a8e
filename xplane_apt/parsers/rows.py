"""
apt.dat row tokenizing and numeric token helpers.

Numeric helpers never raise: a token that does not convert (or converts to
NaN/infinity) yields None, or the given default for integer flags.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from xplane_apt.models.enums import RowCode


@dataclass(frozen=True)
class Row:
    """One non-blank apt.dat line split on whitespace."""

    tokens: List[str]
    line_number: int = 0

    @classmethod
    def from_line(cls, line: str, line_number: int = 0) -> 'Row':
        return cls(tokens=line.split(), line_number=line_number)

    @property
    def code_value(self) -> Optional[int]:
        if not self.tokens:
            return None
        return to_int(self.tokens[0])

    @property
    def row_code(self) -> Optional[RowCode]:
        """The row code, or None when the leading token is unknown or not an integer."""
        return RowCode.from_value(self.code_value)

    def __len__(self) -> int:
        return len(self.tokens)

    def text_from(self, index: int) -> str:
        """Join the tokens from index onward, used for trailing free-text names."""
        return ' '.join(self.tokens[index:])


def split_rows(text: str) -> List[Row]:
    """Tokenize a block of apt.dat text, dropping blank lines."""
    rows = []
    for line in text.splitlines():
        line = line.strip()
        if line:
            rows.append(Row.from_line(line, len(rows) + 1))
    return rows


def to_float(token: Optional[str]) -> Optional[float]:
    if token is None:
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def to_int(token: Optional[str], default: Optional[int] = None) -> Optional[int]:
    """Integer value of a token; '3.0' style tokens are truncated."""
    if token is None:
        return default
    try:
        return int(token)
    except ValueError:
        value = to_float(token)
        return int(value) if value is not None else default


def to_bool(token: Optional[str]) -> bool:
    return bool(to_int(token, 0))
