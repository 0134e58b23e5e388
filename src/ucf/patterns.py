"""Pattern compiler: turns rule patterns into anchored matchers.

A rule pattern is one of three variants:

- ``Regex``: a regular expression, prefix-matched at the scan offset
- ``Literal``: a string matched character for character
- ``Matcher``: a custom function ``(source, offset) -> str | None``

Plain values are accepted too and normalized by ``as_pattern_spec``:
a compiled ``re.Pattern`` is a Regex, a ``str`` is a Literal, and any other
callable is a Matcher.

Every variant compiles to the same capability, a ``MatchFn`` that returns
the text matched at ``offset`` or None. The lexer's case policy always wins
over case flags embedded in a pattern.

Example:
    >>> match = compile_pattern(Regex(r"[a-z]+"), case_sensitive=False)
    >>> match("let X = 1", 4)
    'X'
    >>> match = compile_pattern("+")
    >>> match("1+2", 1)
    '+'

"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from ucf.errors import PatternError

MatchFn = Callable[[str, int], "str | None"]

# Global inline flag groups, e.g. "(?i)" or "(?ms)", at the start of a pattern
_INLINE_FLAGS_RE = re.compile(r"\(\?([aiLmsux]+)\)")

# Scoped flag groups, e.g. "(?i:" or "(?m-i:"
_SCOPED_FLAGS_RE = re.compile(r"\(\?([aiLmsux]*)(?:-([imsx]*))?:")


@dataclass(frozen=True, slots=True)
class Regex:
    """Regular expression pattern.

    Attributes:
        source: Pattern source. A leading ``^`` is optional; matching is
            always anchored at the scan offset
        flags: ``re`` flags. ``re.IGNORECASE`` is overridden by the lexer's
            case policy
    """

    source: str
    flags: int = 0


@dataclass(frozen=True, slots=True)
class Literal:
    """Literal text pattern; every character matches itself."""

    text: str


@dataclass(frozen=True, slots=True)
class Matcher:
    """Custom matcher pattern.

    ``func(source, offset)`` must return the matched prefix of
    ``source[offset:]`` or None.
    """

    func: MatchFn


PatternSpec = Regex | Literal | Matcher
PatternLike = PatternSpec | re.Pattern[str] | str | MatchFn


def as_pattern_spec(pattern: PatternLike) -> PatternSpec:
    """Normalize a rule pattern into one of the three pattern variants.

    Args:
        pattern: Any accepted pattern value

    Returns:
        Regex, Literal or Matcher

    Raises:
        TypeError: If the value is not a recognized pattern
    """
    if isinstance(pattern, (Regex, Literal, Matcher)):
        return pattern
    if isinstance(pattern, re.Pattern):
        return Regex(pattern.pattern, pattern.flags)
    if isinstance(pattern, str):
        return Literal(pattern)
    if callable(pattern):
        return Matcher(pattern)
    msg = f"Unsupported pattern type: {type(pattern).__name__}"
    raise TypeError(msg)


def _split_inline_flags(source: str) -> tuple[str, str]:
    """Split leading global inline flag groups from the pattern body.

    Returns:
        (flag letters, remaining pattern source)
    """
    letters = ""
    pos = 0
    while True:
        m = _INLINE_FLAGS_RE.match(source, pos)
        if m is None:
            break
        letters += m.group(1)
        pos = m.end()
    return letters, source[pos:]


def _scoped_flags_group(on: str, off: str) -> str:
    if off:
        return f"(?{on}-{off}:"
    return f"(?{on}:"


def _apply_scoped_case(body: str, *, case_sensitive: bool) -> str:
    """Rewrite the ``i`` flag of scoped groups such as ``(?i:...)``.

    A case-sensitive policy drops ``i`` from the enabled letters; an
    insensitive policy drops it from the disabled letters. Escapes and
    character classes are copied through untouched.
    """
    out: list[str] = []
    pos = 0
    body_len = len(body)
    in_class = False
    while pos < body_len:
        char = body[pos]
        if char == "\\":
            out.append(body[pos : pos + 2])
            pos += 2
            continue
        if in_class:
            if char == "]":
                in_class = False
            out.append(char)
            pos += 1
            continue
        if char == "[":
            in_class = True
            out.append(char)
            pos += 1
            # Leading "^" and "]" are class members, not terminators
            if pos < body_len and body[pos] == "^":
                out.append("^")
                pos += 1
            if pos < body_len and body[pos] == "]":
                out.append("]")
                pos += 1
            continue
        if char == "(":
            m = _SCOPED_FLAGS_RE.match(body, pos)
            if m is not None:
                on, off = m.group(1), m.group(2) or ""
                if case_sensitive:
                    on = on.replace("i", "")
                else:
                    off = off.replace("i", "")
                out.append(_scoped_flags_group(on, off))
                pos = m.end()
                continue
        out.append(char)
        pos += 1
    return "".join(out)


def normalize_regex(source: str, flags: int, *, case_sensitive: bool) -> tuple[str, int]:
    """Apply anchoring and the case policy to a regex source and flags.

    The leading ``^`` anchor is dropped because ``re.Pattern.match`` with a
    start position already anchors there, while ``^`` itself would only match
    at the real start of the string. In verbose mode, whitespace before that
    ``^`` is ignored.

    The case policy reaches ``re.IGNORECASE``, a leading ``(?i)`` and the
    ``i`` letter of scoped groups like ``(?i:...)`` and ``(?-i:...)``.

    Args:
        source: Pattern source
        flags: ``re`` flags
        case_sensitive: Lexer case policy

    Returns:
        (normalized source, normalized flags)
    """
    letters, body = _split_inline_flags(source)
    anchor_search = body.lstrip() if "x" in letters or flags & re.VERBOSE else body
    if anchor_search.startswith("^"):
        body = anchor_search[1:]

    if case_sensitive:
        flags &= ~re.IGNORECASE
        letters = letters.replace("i", "")
    else:
        flags |= re.IGNORECASE
    body = _apply_scoped_case(body, case_sensitive=case_sensitive)

    prefix = f"(?{letters})" if letters else ""
    return prefix + body, flags


def compile_pattern(
    pattern: PatternLike,
    *,
    case_sensitive: bool = True,
    rule_type: str | None = None,
) -> MatchFn:
    """Compile a rule pattern into an anchored matcher.

    Args:
        pattern: Rule pattern (any accepted variant)
        case_sensitive: Lexer case policy; overrides pattern-level case flags
        rule_type: Owning rule type, used in error messages

    Returns:
        Function ``(source, offset) -> str | None``

    Raises:
        PatternError: If a regular expression does not compile
    """
    spec = as_pattern_spec(pattern)

    if isinstance(spec, Matcher):
        return spec.func

    if isinstance(spec, Literal):
        source = re.escape(spec.text)
        flags = 0 if case_sensitive else re.IGNORECASE
    else:
        source, flags = normalize_regex(spec.source, spec.flags, case_sensitive=case_sensitive)

    try:
        compiled = re.compile(source, flags)
    except re.error as e:
        raise PatternError(rule_type, str(e)) from e

    match = compiled.match

    def match_at(text: str, offset: int) -> str | None:
        m = match(text, offset)
        return m.group(0) if m is not None else None

    return match_at


__all__ = [
    "Literal",
    "MatchFn",
    "Matcher",
    "PatternLike",
    "PatternSpec",
    "Regex",
    "as_pattern_spec",
    "compile_pattern",
    "normalize_regex",
]
