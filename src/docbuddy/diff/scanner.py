"""
Diff Scanner

Scans a single file's unified diff patch for added or modified lines
that are candidates for improvement suggestions.
"""

import logging
from typing import List, Union

from ..errors import MalformedPatchError
from ..models.patch import CandidateLine


logger = logging.getLogger(__name__)

ADDED_MARKER = '+'
NEW_FILE_MARKER = '+++'


def split_patch(patch: Union[str, List[str]]) -> List[str]:
    """
    Split patch text into lines, preserving every line and its index.

    Args:
        patch: Raw patch string, or a list of already split lines

    Returns:
        List of patch lines

    Raises:
        MalformedPatchError: If the patch is neither text nor a list of lines
    """
    if isinstance(patch, str):
        return patch.split('\n')

    if isinstance(patch, (list, tuple)) and all(isinstance(line, str) for line in patch):
        return list(patch)

    raise MalformedPatchError(f"Cannot scan patch of type {type(patch).__name__}")


class DiffScanner:
    """
    Scanner for unified diff patches.

    Only answers "which lines were added"; hunk headers are left to
    PositionResolver.
    """

    def scan(self, patch: Union[str, List[str]]) -> List[CandidateLine]:
        """
        Collect added lines from a patch.

        Args:
            patch: Raw patch string or list of patch lines

        Returns:
            CandidateLine objects in patch order (may be empty)
        """
        lines = split_patch(patch)

        candidates = []
        for index, line in enumerate(lines):
            if line.startswith(ADDED_MARKER) and not line.startswith(NEW_FILE_MARKER):
                candidates.append(CandidateLine(patch_index=index, content=line[1:]))

        logger.debug(f"Scanned {len(lines)} patch lines, found {len(candidates)} candidates")
        return candidates
