"""Helpers that drive a DFA across a whole sequence.

All helpers reset the automaton before scanning and immediately after each
match, so occurrences are reported leftmost-first and never overlap.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Iterator, TypeVar

from .dfa import DFA

E = TypeVar("E", bound=Hashable)


def iter_match_spans(dfa: DFA[E], sequence: Iterable[E]) -> Iterator[tuple[int, int]]:
    """Yield the half-open ``(start, end)`` span of each occurrence.

    Args:
        dfa: Automaton for the pattern. Its current state is discarded.
        sequence: Elements to search. Consumed lazily.

    Yields:
        ``(start, end)`` index pairs into ``sequence``.
    """
    dfa.reset_to_initial_state()
    if dfa.is_empty:
        return

    length = dfa.final_state
    for index, element in enumerate(sequence):
        dfa.update_state(element)
        if dfa.is_at_final_state:
            yield index + 1 - length, index + 1
            dfa.reset_to_initial_state()


def count_matches(dfa: DFA[E], sequence: Iterable[E]) -> int:
    """Count non-overlapping occurrences of the pattern in ``sequence``."""
    return sum(1 for _ in iter_match_spans(dfa, sequence))


def find_first(dfa: DFA[E], sequence: Iterable[E]) -> int | None:
    """Return the start index of the first occurrence, or None.

    Stops consuming ``sequence`` as soon as a match completes.
    """
    for start, _end in iter_match_spans(dfa, sequence):
        return start
    return None


def contains(dfa: DFA[E], sequence: Iterable[E]) -> bool:
    return find_first(dfa, sequence) is not None
