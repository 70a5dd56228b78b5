"""Pattern matcher base classes and types.

This module defines the abstract base for text pattern matchers and the
PatternMatch result type they produce.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator


@dataclass
class PatternMatch:
    """A single pattern match result.

    Contains the location, matched text, and surrounding context
    for a pattern match within a file.
    """

    file_path: str
    line_start: int
    line_end: int
    column_start: int
    column_end: int
    offset: int  # 0-indexed character offset of the first matched character
    matched_text: str
    context_before: str
    context_after: str
    pattern_name: str | None = None

    @property
    def location(self) -> str:
        """Get location string for display."""
        if self.line_start == self.line_end:
            return f"{self.file_path}:{self.line_start}:{self.column_start}"
        return f"{self.file_path}:{self.line_start}-{self.line_end}"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "file_path": self.file_path,
            "line_start": self.line_start,
            "line_end": self.line_end,
            "column_start": self.column_start,
            "column_end": self.column_end,
            "offset": self.offset,
            "matched_text": self.matched_text,
            "context_before": self.context_before,
            "context_after": self.context_after,
            "pattern_name": self.pattern_name,
        }


class PatternMatcher(ABC):
    """Abstract base class for pattern matchers.

    Implementations must provide:
    - match(): Find all matches in one piece of content
    """

    @abstractmethod
    def match(self, content: str, file_path: str) -> Iterator[PatternMatch]:
        """Find all matches in content.

        Args:
            content: File content to search.
            file_path: Path reported on each match.

        Yields:
            PatternMatch for each match found.
        """
        pass

    def match_in_files(
        self,
        files: list[tuple[str, str]],
        limit: int = 100,
    ) -> list[PatternMatch]:
        """Match patterns across multiple files.

        Args:
            files: List of (file_path, content) tuples.
            limit: Maximum total matches to return.

        Returns:
            List of PatternMatch results.
        """
        results = []
        for file_path, content in files:
            for match in self.match(content, file_path):
                results.append(match)
                if len(results) >= limit:
                    return results
        return results
