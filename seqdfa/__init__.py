"""
seqdfa - Single-pass fixed-pattern search with a deterministic automaton.

Compiles a pattern (any sequence of hashable elements) into an explicit
transition table, the automaton form of Knuth-Morris-Pratt, then recognizes
the pattern in a streamed input one element at a time, without backtracking.

Example usage:
    >>> from seqdfa import DFA
    >>> dfa = DFA("ABABAC")
    >>> for ch in "AABACAABABACAA":
    ...     dfa.update_state(ch)
    ...     if dfa.is_at_final_state:
    ...         break
    >>> dfa.state
    6

For text search with line/column reporting:
    >>> from seqdfa import DFAPatternMatcher
    >>> [m.offset for m in DFAPatternMatcher("sea").match("sea shells by the sea", "-")]
    [0, 18]
"""

__version__ = "0.1.0"

from seqdfa.automaton import DFA, build_state_nodes, contains, count_matches, find_first, iter_match_spans
from seqdfa.config import MatcherConfig
from seqdfa.patterns import DFAPatternMatcher, PatternMatch, PatternMatcher
from seqdfa.types.errors import ConfigurationError, InputReadError, SeqDFAError, ValidationError

__all__ = [
    # Automaton
    "DFA",
    "build_state_nodes",
    "contains",
    "count_matches",
    "find_first",
    "iter_match_spans",
    # Text matching
    "DFAPatternMatcher",
    "PatternMatch",
    "PatternMatcher",
    # Configuration
    "MatcherConfig",
    # Exceptions
    "SeqDFAError",
    "ConfigurationError",
    "InputReadError",
    "ValidationError",
    # Version
    "__version__",
]
