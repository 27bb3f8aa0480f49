"""Query line tokenizer and grammar validator.

Turns one raw input line into a `ParsedQuery`, or raises `QuerySyntaxError`
with a one-line diagnostic naming the rule that was broken.

Rules
- Only ASCII letters and whitespace are allowed; anything else rejects the
  whole line before any token is produced.
- Letters are lowercased; maximal letter runs are tokens.
- "and" / "or" are operators. An operator may not start or end the query,
  and two operators may not be adjacent.
- A blank line is valid and produces an empty query.
"""

from __future__ import annotations

import re

from Querier.core.query import ParsedQuery, is_operator

_BAD_CHAR_RE = re.compile(r"[^A-Za-z \t\n\r\f\v]")
_WORD_RE = re.compile(r"[a-z]+")


class QuerySyntaxError(ValueError):
    """Raised when a query line breaks the character set or grammar rules.

    Attributes:
        tokens: Offending character or token(s), in input order.
    """

    def __init__(self, message: str, *tokens: str) -> None:
        super().__init__(message)
        self.tokens = tokens


def normalize_line(line: str) -> str:
    """Lowercase a query line after checking its character set.

    Args:
        line: Raw input line (a trailing newline is fine).

    Returns:
        The lowercased line.

    Raises:
        QuerySyntaxError: On the first character that is neither a letter
            nor whitespace.
    """
    bad = _BAD_CHAR_RE.search(line)
    if bad is not None:
        char = bad.group(0)
        raise QuerySyntaxError(f"bad character '{char}' in query", char)
    return line.lower()


def split_tokens(normalized: str) -> list[str]:
    """Return maximal runs of letters from a normalized line."""
    return _WORD_RE.findall(normalized)


def validate_tokens(tokens: list[str]) -> None:
    """Check operator placement.

    Args:
        tokens: Normalized tokens.

    Raises:
        QuerySyntaxError: If an operator is first, last, or next to another
            operator. Checked in that order.
    """
    if not tokens:
        return
    if is_operator(tokens[0]):
        raise QuerySyntaxError(f"'{tokens[0]}' cannot be first", tokens[0])
    if is_operator(tokens[-1]):
        raise QuerySyntaxError(f"'{tokens[-1]}' cannot be last", tokens[-1])
    for left, right in zip(tokens, tokens[1:]):
        if is_operator(left) and is_operator(right):
            raise QuerySyntaxError(f"'{left}' and '{right}' cannot be adjacent", left, right)


def tokenize_query(line: str) -> ParsedQuery:
    """Tokenize and validate one query line.

    Args:
        line: Raw input line.

    Returns:
        Validated query; empty for a blank line.

    Raises:
        QuerySyntaxError: If the line is rejected.
    """
    tokens = split_tokens(normalize_line(line))
    validate_tokens(tokens)
    return ParsedQuery(tokens=tuple(tokens))
