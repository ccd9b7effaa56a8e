"""
Parse outcome reporting.

Parsing never aborts on a bad row: the row is skipped and a ParseError is
recorded so callers can inspect what was dropped.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar('T')


@dataclass
class ParseError:
    """Represents a single skipped or rejected row."""

    message: str
    line: Optional[int] = None
    path: Optional[str] = None

    def __str__(self) -> str:
        location = f"line {self.line}" if self.line is not None else "unknown line"
        if self.path:
            return f"{location} [{self.path}]: {self.message}"
        return f"{location}: {self.message}"


@dataclass
class ParseStats:
    total: int = 0
    parsed: int = 0
    skipped: int = 0
    time_ms: Optional[float] = None


@dataclass
class ParseResult(Generic[T]):
    """Result of a parse: the data plus the errors met along the way."""

    data: T
    errors: List[ParseError] = field(default_factory=list)
    stats: ParseStats = field(default_factory=ParseStats)

    @property
    def is_clean(self) -> bool:
        """Check if parsing met no error."""
        return len(self.errors) == 0

    def get_error_messages(self) -> List[str]:
        """Get all error messages as strings."""
        return [str(error) for error in self.errors]

    def __str__(self) -> str:
        if self.is_clean:
            return f"Parsed {self.stats.parsed} records"
        return f"Parsed {self.stats.parsed} records ({len(self.errors)} errors, {self.stats.skipped} skipped)"
