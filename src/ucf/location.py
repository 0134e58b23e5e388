"""Source position tracking for tokens and diagnostics.

Thread Safety:
Position is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Start position of a token in the source text.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Absolute character offset into the source (0-indexed)
        filename: Source file path (optional)

    Examples:
            >>> pos = Position(line=2, column=5, offset=12)
            >>> str(pos)
            '2:5'

            >>> str(Position(1, 1, 0, "calc.src"))
            'calc.src:1:1'

    """

    line: int
    column: int
    offset: int
    filename: str | None = None

    def __str__(self) -> str:
        """Format position for error messages.

        Returns:
            Formatted string like "file.src:10:5" or "10:5"
        """
        if self.filename:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"
