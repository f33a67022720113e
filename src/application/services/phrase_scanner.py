"""Phrase scanner - run/terminal index used by the pattern extractor.

Phrases such as "Acme Widgets Inc" are a run of characters from one class
that ends in a terminal token. Written as a single backtracking regex, every
start position rescans the rest of its run, which is quadratic on long
prose. The index splits the text into maximal runs once, finds every
terminal once, and answers each start position with a binary search.
"""
import re
from bisect import bisect_left, bisect_right
from typing import List, Optional, Tuple

Span = Tuple[int, int]


class RunIndex:
    """
    Maximal runs of one character class, plus the terminal tokens in the text.

    terminal_pattern must be a lookahead wrapping one group, e.g.
    ``(?=(Inc|LLC))``, so that overlapping tokens are all reported. Every
    character a terminal can match must belong to the run class; a terminal
    starting inside a run then also ends inside it.
    """

    def __init__(self, text: str, run_pattern: re.Pattern, terminal_pattern: re.Pattern):
        self.runs: List[Span] = [match.span() for match in run_pattern.finditer(text)]
        self._run_starts = [start for start, _ in self.runs]
        self._terminals: List[Span] = [
            (match.start(), match.end(1)) for match in terminal_pattern.finditer(text)
        ]
        self._terminal_starts = [start for start, _ in self._terminals]

    def run_at(self, position: int) -> Optional[Span]:
        """Return the run holding position, or None for a character outside the class."""
        index = bisect_right(self._run_starts, position) - 1
        if index < 0:
            return None
        start, end = self.runs[index]
        return (start, end) if position < end else None

    def last_terminal(self, position: int, lowest: int) -> Optional[Span]:
        """
        Return the rightmost terminal in the run holding position.

        Mirrors a greedy ``<class>+<terminal>`` match: the longest phrase wins.
        Terminals starting before lowest do not count.
        """
        run = self.run_at(position)
        if run is None:
            return None
        index = bisect_left(self._terminal_starts, run[1]) - 1
        if index < 0 or self._terminals[index][0] < lowest:
            return None
        return self._terminals[index]


def positions(pattern: re.Pattern, text: str) -> List[int]:
    """Start offsets of every match of pattern, in order."""
    return [match.start() for match in pattern.finditer(text)]


def first_after(sorted_positions: List[int], position: int) -> Optional[int]:
    """Smallest entry strictly greater than position."""
    index = bisect_right(sorted_positions, position)
    return sorted_positions[index] if index < len(sorted_positions) else None
