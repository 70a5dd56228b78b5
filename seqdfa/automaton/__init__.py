"""Pattern automaton: construction, stepping and whole-sequence scans."""

from .dfa import DFA, build_state_nodes
from .scan import contains, count_matches, find_first, iter_match_spans

__all__ = [
    "DFA",
    "build_state_nodes",
    "contains",
    "count_matches",
    "find_first",
    "iter_match_spans",
]
