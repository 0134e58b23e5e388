"""Rule-driven lexer.

Scans a source string left to right. At each offset the lexer either skips
a whitespace character, emits the token of the first rule that matches, or
emits a single-character ERROR token and moves on. Scanning never aborts on
bad input, and every iteration advances by at least one character.

Rule priority is rule order (precedence, then registration), not longest
match: give overlapping patterns explicit precedence.

Thread Safety:
A Lexer may be reused for any number of sources, but its rule set and
options are mutable and unlocked. Streams returned by tokenize() are
independent of the lexer and of each other.

"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace
from time import perf_counter
from typing import Any

from ucf.config import LexerConfig, LexerOptions, SkipWhitespace
from ucf.diagnostics import ValidationResult
from ucf.errors import MatcherContractError, PatternError
from ucf.location import Position
from ucf.patterns import MatchFn, Matcher, as_pattern_spec, compile_pattern
from ucf.profiling import get_lex_accumulator
from ucf.rules import RuleSet
from ucf.stream import TokenStream
from ucf.tokens import ERROR, Token, TokenRule
from ucf.utils.logger import get_logger

logger = get_logger(__name__)

# (rule, matcher, matcher is user-supplied)
_CompiledRule = tuple[TokenRule, MatchFn, bool]


def _advance_position(text: str, lineno: int, col: int) -> tuple[int, int]:
    """Line and column after consuming text starting at (lineno, col)."""
    newline_count = text.count("\n")
    if newline_count:
        return lineno + newline_count, len(text) - text.rfind("\n")
    return lineno, col + len(text)


def _whitespace_predicate(skip: SkipWhitespace) -> Callable[[str], bool] | None:
    """Build the per-character skip test for a skip_whitespace setting.

    Raises:
        re.error: If skip is a pattern source that does not compile
    """
    if skip is False:
        return None
    if skip is True:
        return str.isspace
    pattern = re.compile(skip) if isinstance(skip, str) else skip
    search = pattern.search
    return lambda char: search(char) is not None


class Lexer:
    """Configurable lexer over a precedence-ordered rule set.

    Usage:
        >>> import re
        >>> lexer = Lexer([
        ...     TokenRule("NUM", re.compile(r"[0-9]+")),
        ...     TokenRule("PLUS", "+"),
        ... ])
        >>> stream = lexer.tokenize("1 + 2")
        >>> [(t.type, t.value, t.offset) for t in stream.get_tokens()]
        [('NUM', '1', 0), ('PLUS', '+', 2), ('NUM', '2', 4)]

    """

    __slots__ = ("_rules", "_options", "_compiled", "_skip", "_skip_ready")

    def __init__(
        self,
        rules: Iterable[TokenRule] = (),
        *,
        skip_whitespace: SkipWhitespace | None = None,
        case_sensitive: bool | None = None,
    ) -> None:
        """Initialize lexer with rules and options.

        Args:
            rules: Token rules, in registration order
            skip_whitespace: True (default) skips all whitespace, False keeps
                it, a pattern skips only matching characters
            case_sensitive: Case policy for every rule pattern (default True)
        """
        config = LexerConfig(
            rules=tuple(rules),
            skip_whitespace=skip_whitespace,
            case_sensitive=case_sensitive,
        )
        self._rules = RuleSet(config.rules)
        self._options: LexerOptions = config.resolve()

        # Scan-time caches, rebuilt lazily after rule or option changes
        self._compiled: list[_CompiledRule] | None = None
        self._skip: Callable[[str], bool] | None = None
        self._skip_ready = False

    @classmethod
    def from_config(cls, config: LexerConfig) -> Lexer:
        """Create a lexer from a LexerConfig."""
        return cls(
            config.rules,
            skip_whitespace=config.skip_whitespace,
            case_sensitive=config.case_sensitive,
        )

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> Lexer:
        """Create a lexer from a mapping; unknown keys are ignored."""
        return cls.from_config(LexerConfig.from_dict(config_dict))

    # =========================================================================
    # Scanning
    # =========================================================================

    def tokenize(self, source: str, *, filename: str | None = None) -> TokenStream:
        """Tokenize source into a fresh token stream.

        Args:
            source: Source text
            filename: Optional source file path recorded in token positions

        Returns:
            TokenStream over every emitted token

        Raises:
            MatcherContractError: If a custom matcher returns text that does
                not occur at the scan offset
        """
        started = perf_counter()
        compiled = self._compiled_rules()
        skip = self._skip_predicate()

        tokens: list[Token] = []
        error_count = 0
        source_len = len(source)
        pos = 0
        lineno = 1
        col = 1

        while pos < source_len:
            char = source[pos]

            if skip is not None and skip(char):
                pos += 1
                if char == "\n":
                    lineno += 1
                    col = 1
                else:
                    col += 1
                continue

            position = Position(lineno, col, pos, filename)

            for rule, match, custom in compiled:
                text = match(source, pos)
                if not text:
                    continue
                if custom and not source.startswith(text, pos):
                    raise MatcherContractError(rule.type, pos, text)

                if rule.action is not None:
                    token = rule.action(text, position)
                else:
                    token = Token(rule.type, text, position)
                if token is not None:
                    tokens.append(token)

                lineno, col = _advance_position(text, lineno, col)
                pos += len(text)
                break
            else:
                tokens.append(
                    Token(ERROR, char, position, {"error": f"Unexpected character: {char}"})
                )
                error_count += 1
                lineno, col = _advance_position(char, lineno, col)
                pos += 1

        elapsed = perf_counter() - started
        logger.debug(
            "Tokenized %d characters into %d tokens (%d errors)",
            source_len,
            len(tokens),
            error_count,
        )
        acc = get_lex_accumulator()
        if acc is not None:
            acc.record_tokenize(
                source_length=source_len,
                token_count=len(tokens),
                error_count=error_count,
                elapsed=elapsed,
            )

        return TokenStream(tokens)

    def _compiled_rules(self) -> list[_CompiledRule]:
        """Compile rule patterns for the current case policy (cached).

        Rules whose pattern does not compile are left out; validate_rules()
        is where such problems are reported.
        """
        if self._compiled is not None:
            return self._compiled

        case_sensitive = self._options.case_sensitive
        compiled: list[_CompiledRule] = []
        for rule in self._rules:
            try:
                match = compile_pattern(
                    rule.pattern, case_sensitive=case_sensitive, rule_type=rule.type
                )
            except (PatternError, TypeError) as e:
                logger.warning("Skipping rule %r: %s", rule.type, e)
                continue
            custom = isinstance(as_pattern_spec(rule.pattern), Matcher)
            compiled.append((rule, match, custom))

        self._compiled = compiled
        return compiled

    def _skip_predicate(self) -> Callable[[str], bool] | None:
        """Per-character whitespace test for the current options (cached)."""
        if not self._skip_ready:
            try:
                self._skip = _whitespace_predicate(self._options.skip_whitespace)
            except re.error as e:
                logger.warning("Ignoring invalid skip_whitespace pattern: %s", e)
                self._skip = None
            self._skip_ready = True
        return self._skip

    # =========================================================================
    # Rule management
    # =========================================================================

    def add_rule(self, rule: TokenRule) -> None:
        """Add a rule; it goes after existing rules of equal precedence."""
        self._rules.add(rule)
        self._compiled = None
        logger.debug("Added rule %r (precedence %d)", rule.type, rule.precedence)

    def remove_rule(self, rule_type: str) -> None:
        """Remove every rule with the given type."""
        removed = self._rules.remove_type(rule_type)
        self._compiled = None
        logger.debug("Removed %d rule(s) of type %r", removed, rule_type)

    @property
    def rules(self) -> list[TokenRule]:
        """Snapshot of the rules in match order.

        Mutating the returned list does not affect the lexer.
        """
        return self._rules.snapshot()

    def validate_rules(self) -> ValidationResult:
        """Check the rule configuration without raising.

        Reports an error for an empty rule set, a warning for each type with
        several rules, and an error for each pattern that fails to compile.

        Returns:
            ValidationResult with valid, errors and warnings
        """
        errors: list[str] = []
        warnings: list[str] = []

        if not self._rules:
            errors.append("No token rules defined")

        for rule_type, count in self._rules.type_counts().items():
            if count > 1:
                warnings.append(f'Multiple rules defined for type "{rule_type}"')

        case_sensitive = self._options.case_sensitive
        for rule in self._rules:
            try:
                compile_pattern(rule.pattern, case_sensitive=case_sensitive, rule_type=rule.type)
            except PatternError as e:
                errors.append(str(e))
            except TypeError as e:
                errors.append(f'Invalid pattern for rule "{rule.type}": {e}')

        skip = self._options.skip_whitespace
        if isinstance(skip, str):
            try:
                re.compile(skip)
            except re.error as e:
                errors.append(f"Invalid skip_whitespace pattern: {e}")

        return ValidationResult.from_messages(errors, warnings)

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def config(self) -> LexerOptions:
        """Resolved options used by the next tokenize() call."""
        return self._options

    def update_config(
        self,
        *,
        skip_whitespace: SkipWhitespace | None = None,
        case_sensitive: bool | None = None,
    ) -> None:
        """Change options for subsequent tokenize() calls.

        Arguments left as None keep their current value. Streams already
        produced are unaffected.
        """
        options = self._options
        if skip_whitespace is not None:
            options = replace(options, skip_whitespace=skip_whitespace)
            self._skip_ready = False
        if case_sensitive is not None:
            options = replace(options, case_sensitive=case_sensitive)
            self._compiled = None
        self._options = options

    def __repr__(self) -> str:
        return (
            f"Lexer(rules={len(self._rules)}, "
            f"skip_whitespace={self._options.skip_whitespace!r}, "
            f"case_sensitive={self._options.case_sensitive})"
        )
