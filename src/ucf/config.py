"""Lexer configuration.

``LexerConfig`` is the user-facing description of a lexer: its rules plus
optional settings. ``LexerOptions`` is the resolved form the lexer reads at
scan time, with every optional field filled in.

Both are frozen. A lexer swaps its ``LexerOptions`` for a new instance when
``Lexer.update_config()`` is called, so streams that were already produced
are never affected.

Usage:
    >>> import re
    >>> from ucf import Lexer, LexerConfig, TokenRule
    >>> config = LexerConfig(
    ...     rules=(TokenRule("NUM", re.compile(r"[0-9]+")),),
    ...     case_sensitive=False,
    ... )
    >>> lexer = Lexer.from_config(config)

    >>> # Or from a plain mapping (framework integration)
    >>> config = LexerConfig.from_dict({"rules": [...], "skip_whitespace": False})

"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ucf.tokens import TokenRule

SkipWhitespace = bool | re.Pattern[str] | str


@dataclass(frozen=True, slots=True)
class LexerOptions:
    """Resolved scan-time options.

    Attributes:
        skip_whitespace: True skips any whitespace character, False disables
            skipping, and a pattern (compiled or source string) skips only
            characters that match it
        case_sensitive: Case policy applied to every rule pattern

    """

    skip_whitespace: SkipWhitespace = True
    case_sensitive: bool = True


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Complete lexer description.

    Attributes:
        rules: Token rules, in registration order
        skip_whitespace: See ``LexerOptions.skip_whitespace``; None means default
        case_sensitive: See ``LexerOptions.case_sensitive``; None means default

    """

    rules: tuple[TokenRule, ...] = field(default=())
    skip_whitespace: SkipWhitespace | None = None
    case_sensitive: bool | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.rules, tuple):
            object.__setattr__(self, "rules", tuple(self.rules))

    def resolve(self) -> LexerOptions:
        """Fill in defaults for unset optional fields.

        Returns:
            Fully populated LexerOptions
        """
        defaults = LexerOptions()
        return LexerOptions(
            skip_whitespace=(
                defaults.skip_whitespace if self.skip_whitespace is None else self.skip_whitespace
            ),
            case_sensitive=(
                defaults.case_sensitive if self.case_sensitive is None else self.case_sensitive
            ),
        )

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> LexerConfig:
        """Create LexerConfig from a mapping.

        Only keys that are LexerConfig fields are used; unknown keys are
        silently ignored. ``rules`` may be any iterable of TokenRule.

        Args:
            config_dict: Mapping with config values

        Returns:
            New LexerConfig instance

        Example:
            >>> config = LexerConfig.from_dict({
            ...     "case_sensitive": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.case_sensitive
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        rules: Iterable[TokenRule] = filtered.pop("rules", ())
        return cls(rules=tuple(rules), **filtered)


__all__ = [
    "LexerConfig",
    "LexerOptions",
    "SkipWhitespace",
]
