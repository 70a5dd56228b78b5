"""Deterministic finite-state automaton for a single fixed pattern.

The automaton is the explicit-table form of Knuth-Morris-Pratt: one
transition map per matched-prefix length, built in a single pass over the
pattern. Matching then costs one dict lookup per input element.

Usage:
    dfa = DFA("seashells")
    for ch in text:
        dfa.update_state(ch)
        if dfa.is_at_final_state:
            print("Found match")
            break

Call reset_to_initial_state() before reusing an automaton on an unrelated
input. Otherwise a prefix matched at the end of the previous input carries
over into the next one.
"""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, TypeVar

from seqdfa.utils.logger import logger

E = TypeVar("E", bound=Hashable)

_MISSING = object()


def build_state_nodes(pattern: Iterable[E]) -> list[dict[E, int]]:
    """Compile a pattern into its table of state nodes.

    Node ``i`` holds the transitions taken after matching a prefix of
    length ``i``. Elements absent from a node lead back to state 0; those
    edges are never stored.

    Args:
        pattern: Elements to recognize. Consumed exactly once.

    Returns:
        List of transition maps, one per pattern element. An empty pattern
        yields a single empty node.
    """
    nodes: list[dict[E, int]] = [{}]
    elements = iter(pattern)

    first = next(elements, _MISSING)
    if first is _MISSING:
        return nodes

    nodes[0][first] = 1
    restart = 0
    for element in elements:
        node = dict(nodes[restart])
        node[element] = len(nodes) + 1
        nodes.append(node)
        restart = nodes[restart].get(element, 0)

    logger.debug(f"Built DFA with {len(nodes)} state nodes")
    return nodes


class DFA(Generic[E]):
    """Automaton recognizing one fixed pattern in a streamed sequence.

    States are numbered ``0..N`` where ``N`` is the pattern length. State 0
    is the initial state and state ``N`` is the final (accepting) state.
    The transition table is fixed at construction; only the current state
    changes.
    """

    initial_state = 0

    def __init__(self, pattern: Iterable[E]):
        """Build the automaton for a pattern.

        Args:
            pattern: Any finite iterable of hashable elements.
        """
        self._states: list[dict[E, int]] = build_state_nodes(pattern)
        self._state = self.initial_state

    @property
    def state(self) -> int:
        """The state this automaton is currently at."""
        return self._state

    @property
    def final_state(self) -> int:
        """The accepting state. Unreachable when the pattern is empty."""
        return len(self._states)

    @property
    def is_empty(self) -> bool:
        """True when the automaton was built from an empty pattern."""
        return not self._states[0]

    @property
    def is_at_initial_state(self) -> bool:
        return self._state == self.initial_state

    @property
    def is_at_final_state(self) -> bool:
        return self._state == len(self._states)

    @property
    def pattern(self) -> Iterator[E]:
        """The elements of the recognized pattern, in order.

        Every access returns a new, independent iterator.
        """
        return _iter_pattern(self._states)

    def next_state(self, state: int, element: E) -> int:
        """Compute the transition from ``state`` on ``element``.

        Does not change the current state. The final state wraps onto
        node 0, so stepping past an accept restarts from the initial node.

        Args:
            state: A state index in ``0..final_state``.
            element: The next input element.

        Returns:
            The next state index.
        """
        node = self._states[state % len(self._states)]
        if element in node:
            return node[element]
        return self.initial_state

    def update_state(self, element: E) -> None:
        """Advance the current state by one input element."""
        self._state = self.next_state(self._state, element)

    def reset_to_initial_state(self) -> None:
        """Move back to the initial state."""
        self._state = self.initial_state

    def transitions(self, state: int) -> dict[E, int]:
        """Return a copy of the stored transitions for a state.

        Args:
            state: A state index in ``0..final_state - 1``.

        Raises:
            IndexError: If the state has no node (the final state or
                anything beyond it).
        """
        if not 0 <= state < len(self._states):
            raise IndexError(f"state {state} has no transition node")
        return dict(self._states[state])

    def __len__(self) -> int:
        return 0 if self.is_empty else len(self._states)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(state={self._state}, "
            f"final_state={self.final_state}, length={len(self)})"
        )


def _iter_pattern(states: list[dict[E, int]]) -> Iterator[E]:
    for index, node in enumerate(states):
        for element, target in node.items():
            if target == index + 1:
                yield element
                break
