from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Sequence

AND: Final[str] = "and"
OR: Final[str] = "or"
OPERATORS: Final[frozenset[str]] = frozenset({AND, OR})


def is_operator(token: str) -> bool:
    """Return True if token is one of the reserved operators."""
    return token in OPERATORS


@dataclass(frozen=True, slots=True)
class ParsedQuery:
    """Validated, normalized boolean query.

    The grammar is:

        Query     ::= AndGroup ( "or" AndGroup )*
        AndGroup  ::= Term ( ["and"] Term )*

    "and" binds tighter than "or", and two adjacent terms are an implicit
    "and". Instances are only built by the tokenizer, which guarantees the
    token sequence is grammatical.

    Attributes:
        tokens: Normalized terms and operators in input order.
    """

    tokens: tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    @property
    def terms(self) -> tuple[str, ...]:
        """Search terms with operators removed."""
        return tuple(t for t in self.tokens if not is_operator(t))

    @property
    def and_groups(self) -> tuple[tuple[str, ...], ...]:
        """Split tokens into AND-groups at each "or".

        Returns:
            One tuple of terms per AND-group, in query order.
        """
        return split_and_groups(self.tokens)

    def display(self) -> str:
        """Return tokens joined by single spaces, as echoed to the user."""
        return " ".join(self.tokens)


def split_and_groups(tokens: Sequence[str]) -> tuple[tuple[str, ...], ...]:
    """Split a validated token sequence into AND-groups.

    Explicit "and" tokens are dropped since adjacency already means AND.

    Args:
        tokens: Grammatical token sequence.

    Returns:
        Tuple of AND-groups; empty when tokens is empty.
    """
    groups: list[tuple[str, ...]] = []
    current: list[str] = []
    for token in tokens:
        if token == OR:
            groups.append(tuple(current))
            current = []
        elif token != AND:
            current.append(token)
    if current:
        groups.append(tuple(current))
    return tuple(groups)
