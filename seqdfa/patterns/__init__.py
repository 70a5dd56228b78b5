"""Text pattern matching built on the pattern DFA.

Components:
- PatternMatch: Result type for pattern matches
- PatternMatcher: Abstract base class for matchers
- DFAPatternMatcher: Fixed-string matching with line/column/context reporting

Usage:
    from seqdfa.patterns import DFAPatternMatcher

    matcher = DFAPatternMatcher("seashells")
    for match in matcher.match(content, "notes.txt"):
        print(f"{match.location}: {match.matched_text}")
"""

from .matcher import PatternMatch, PatternMatcher
from .dfa_matcher import DFAPatternMatcher, fold_char

__all__ = [
    "PatternMatch",
    "PatternMatcher",
    "DFAPatternMatcher",
    "fold_char",
]
