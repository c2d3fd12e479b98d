"""
Position Resolver

Maps a patch line index to the comment position used by GitHub's
review comment API. Positions are counted from the new-file start line
of the most recent hunk header, skipping removed lines.
"""

import logging
import re
from typing import List, Tuple

from ..models.patch import HunkAnchor


logger = logging.getLogger(__name__)

HUNK_PREFIX = '@@ '
REMOVED_MARKER = '-'
ADDED_MARKER = '+'


class PositionResolver:
    """Resolves review comment positions inside a patch."""

    def __init__(self):
        """Initialize position resolver."""
        # Long form only: "@@ -1 +1 @@" does not anchor a hunk
        self.hunk_header_pattern = re.compile(r'@@ -\d+,\d+ \+(\d+),\d+ @@')

    def resolve(self, lines: List[str], target_index: int) -> int:
        """
        Compute the comment position for a patch line.

        Args:
            lines: Patch lines, in order
            target_index: Index of the line to comment on

        Returns:
            Position, at least 1. Falls back to 1 on any error.
        """
        try:
            hunk_start, count_since_hunk = self._walk(lines, target_index)
            return max(hunk_start + count_since_hunk, 1)
        except Exception as e:
            logger.error(f"Error calculating file position: {e}")
            return 1

    def anchor_for(self, lines: List[str], target_index: int) -> HunkAnchor:
        """
        Get the hunk anchor in effect at a patch line.

        Args:
            lines: Patch lines, in order
            target_index: Index of the line

        Returns:
            HunkAnchor (start_line 0 when no header precedes the line)
        """
        try:
            hunk_start, _ = self._walk(lines, target_index)
        except Exception as e:
            logger.error(f"Error locating hunk anchor: {e}")
            hunk_start = 0
        return HunkAnchor(start_line=hunk_start)

    def _walk(self, lines: List[str], target_index: int) -> Tuple[int, int]:
        """Scan lines before target_index, tracking the hunk start and line count."""
        hunk_start = 0
        count_since_hunk = 0

        for line in lines[:max(target_index, 0)]:
            if line.startswith(HUNK_PREFIX):
                match = self.hunk_header_pattern.search(line)
                if match:
                    hunk_start = int(match.group(1))
                    count_since_hunk = 0
            elif line.startswith(ADDED_MARKER):
                count_since_hunk += 1
            elif not line.startswith(REMOVED_MARKER):
                count_since_hunk += 1

        return hunk_start, count_since_hunk
