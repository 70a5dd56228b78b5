"""Literal text matching driven by a pattern DFA.

Finds every non-overlapping occurrence of one fixed string in a single
left-to-right pass, without backtracking and without regex compilation.
"""

from __future__ import annotations

import copy
from bisect import bisect_right
from typing import Iterable, Iterator

from seqdfa.automaton import DFA, count_matches, find_first, iter_match_spans
from seqdfa.config import MatcherConfig
from seqdfa.utils.logger import logger

from .matcher import PatternMatch, PatternMatcher


def fold_char(ch: str) -> str:
    """Case-fold one character, keeping it as-is if folding changes its length."""
    folded = ch.casefold()
    return folded if len(folded) == 1 else ch


class DFAPatternMatcher(PatternMatcher):
    """Fixed-string pattern matching over text.

    The pattern is compiled into a DFA once. Each scan works on a shallow
    copy of it, sharing the transition table but owning its own current
    state, so a matcher can serve interleaved scans.

    Usage:
        matcher = DFAPatternMatcher("TODO")
        for match in matcher.match(content, "src/app.py"):
            print(f"{match.location}: {match.matched_text}")
    """

    def __init__(
        self,
        pattern: str,
        name: str | None = None,
        config: MatcherConfig | None = None,
    ):
        """Compile a pattern.

        Args:
            pattern: Literal text to search for. An empty pattern never matches.
            name: Name reported on each match. Defaults to the pattern itself.
            config: Scan settings. Defaults to MatcherConfig().
        """
        self.pattern = pattern
        self.name = name or pattern
        self.config = config or MatcherConfig()
        self._dfa: DFA[str] = DFA(self._elements(pattern))

    @property
    def dfa(self) -> DFA[str]:
        """A fresh automaton for this pattern, at its initial state."""
        return self._fresh_dfa()

    def _fresh_dfa(self) -> DFA[str]:
        dfa = copy.copy(self._dfa)
        dfa.reset_to_initial_state()
        return dfa

    def _elements(self, text: str) -> Iterable[str]:
        if self.config.ignore_case:
            return (fold_char(ch) for ch in text)
        return text

    def _guard_size(self, content: str) -> str:
        limit = self.config.max_content_size
        if len(content) > limit:
            logger.warning(
                f"Content size {len(content)} exceeds limit {limit}, "
                f"truncating for pattern '{self.name[:100]}'"
            )
            return content[:limit]
        return content

    def _extract_context(
        self,
        lines: list[str],
        line_start: int,
        line_end: int,
    ) -> tuple[str, str]:
        """Extract context lines around a match.

        Args:
            lines: All lines of the content.
            line_start: Start line (1-indexed).
            line_end: End line (1-indexed).

        Returns:
            Tuple of (context_before, context_after).
        """
        context_lines = self.config.context_lines
        start_idx = line_start - 1
        end_idx = line_end - 1

        if context_lines == 0:
            return "", ""

        context_before = "\n".join(lines[max(0, start_idx - context_lines) : start_idx])
        context_after = "\n".join(lines[end_idx + 1 : end_idx + 1 + context_lines])
        return context_before, context_after

    def _create_match(
        self,
        content: str,
        lines: list[str],
        line_offsets: list[int],
        file_path: str,
        start: int,
        end: int,
    ) -> PatternMatch:
        """Create a PatternMatch from a ``[start, end)`` span of content."""
        # Line numbers are 1-indexed; the match's last character sits at end - 1.
        line_start = bisect_right(line_offsets, start)
        line_end = bisect_right(line_offsets, end - 1)

        col_start = start - line_offsets[line_start - 1] + 1
        col_end = end - line_offsets[line_end - 1] + 1

        context_before, context_after = self._extract_context(lines, line_start, line_end)

        return PatternMatch(
            file_path=file_path,
            line_start=line_start,
            line_end=line_end,
            column_start=col_start,
            column_end=col_end,
            offset=start,
            matched_text=content[start:end],
            context_before=context_before,
            context_after=context_after,
            pattern_name=self.name,
        )

    def match(self, content: str, file_path: str) -> Iterator[PatternMatch]:
        """Find every non-overlapping occurrence of the pattern.

        Args:
            content: Text to search.
            file_path: Path reported on each match.

        Yields:
            PatternMatch for each occurrence, in order of position.
        """
        content = self._guard_size(content)
        dfa = self._fresh_dfa()
        if dfa.is_empty:
            return

        lines = content.split("\n")
        line_offsets = [0]
        for line in lines[:-1]:
            line_offsets.append(line_offsets[-1] + len(line) + 1)

        found = 0
        for start, end in iter_match_spans(dfa, self._elements(content)):
            yield self._create_match(content, lines, line_offsets, file_path, start, end)
            found += 1
            if found >= self.config.max_matches:
                logger.warning(
                    f"Match count reached {self.config.max_matches} for pattern "
                    f"'{self.name[:100]}' in {file_path}, stopping"
                )
                break

        logger.debug(f"Found {found} matches for '{self.name[:100]}' in {file_path}")

    def count(self, content: str) -> int:
        """Count non-overlapping occurrences in content."""
        content = self._guard_size(content)
        return count_matches(self._fresh_dfa(), self._elements(content))

    def first_offset(self, content: str) -> int | None:
        """Return the offset of the first occurrence, or None if absent."""
        content = self._guard_size(content)
        return find_first(self._fresh_dfa(), self._elements(content))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.pattern!r}, name={self.name!r})"
