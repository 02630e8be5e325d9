"""
Free Group Word Algebra
=======================
Words over the alphabet {a, A, b, B} of the free group F2, where ``A`` and ``B``
denote the inverses of ``a`` and ``b``. A word is a plain ``str``; the empty
string is the identity element (epsilon).

Functions:
    is_inverse_pair: Test whether two symbols cancel.
    reduce_word: Free reduction of a word.
    in_a, in_b: The partition F2 = A u B by first letter.
    in_coset_aa, in_coset_bb: Membership in the translated sets aA and bB.
"""
from __future__ import annotations

from typing import Final

SYMBOLS: Final[tuple[str, ...]] = ("a", "A", "b", "B")

_INVERSES: Final[dict[str, str]] = {"a": "A", "A": "a", "b": "B", "B": "b"}


def is_inverse_pair(prev: str, next_: str) -> bool:
    """True iff ``next_`` is the group inverse of ``prev`` (a/A or b/B)."""
    return _INVERSES.get(prev) == next_


def inverse(symbol: str) -> str:
    """Return the inverse symbol of ``symbol``."""
    try:
        return _INVERSES[symbol]
    except KeyError:
        raise ValueError(f"'{symbol}' is not a symbol of F2.") from None


def inverse_word(word: str) -> str:
    """Return the group inverse of ``word`` (reversed, each symbol inverted)."""
    return "".join(inverse(c) for c in reversed(word))


def reduce_word(word: str) -> str:
    """
    Freely reduce a word by cancelling adjacent inverse pairs.

    A single left-to-right pass over the input, using the output as a stack:
    a cancellation can only expose a pair between the new stack top and the
    next input symbol, which the following iteration checks anyway.

    Args:
        word: Any sequence of symbols. Characters outside the alphabet are kept
            as they are and never cancel.

    Returns:
        The unique reduced representative of ``word``.
    """
    stack: list[str] = []
    for c in word:
        if stack and is_inverse_pair(stack[-1], c):
            stack.pop()
        else:
            stack.append(c)
    return "".join(stack)


def is_reduced(word: str) -> bool:
    """True iff no two adjacent symbols of ``word`` are mutual inverses."""
    return not any(is_inverse_pair(p, n) for p, n in zip(word, word[1:]))


def in_a(word: str) -> bool:
    """Partition A: the identity and every word starting with ``a`` or ``A``."""
    if not word:
        return True  # epsilon belongs to A
    return word[0] in ("a", "A")


def in_b(word: str) -> bool:
    """Partition B: every word starting with ``b`` or ``B``."""
    if not word:
        return False
    return word[0] in ("b", "B")


def in_coset_aa(word: str) -> bool:
    """Membership in aA, i.e. a^-1 * word lies in A."""
    return in_a(reduce_word("A" + word))


def in_coset_bb(word: str) -> bool:
    """Membership in bB, i.e. b^-1 * word lies in B."""
    return in_b(reduce_word("B" + word))
