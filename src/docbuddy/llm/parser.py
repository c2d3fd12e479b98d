"""
Response Parser

Classifies raw oracle output as a reasoned suggestion, a bare
suggestion, or no change at all.
"""

import logging

from ..models.suggestion import (
    BareSuggestion,
    NoChange,
    ParsedOutcome,
    StructuredSuggestion,
)


logger = logging.getLogger(__name__)

REASON_MARKER = "reason:"
SUGGESTION_MARKER = "suggestion:"
SUGGESTION_SEPARATOR = "\n" + SUGGESTION_MARKER


class ResponseParser:
    """Parses oracle responses in the "reason: ...\\nsuggestion: ..." format."""

    def parse(self, raw: str, original: str) -> ParsedOutcome:
        """
        Parse an oracle response.

        Args:
            raw: Raw oracle text
            original: The line that was sent to the oracle

        Returns:
            StructuredSuggestion, BareSuggestion, or NoChange
        """
        if self.has_markers(raw):
            parts = raw.split(SUGGESTION_SEPARATOR)
            if len(parts) == 2:
                reason = parts[0].replace(REASON_MARKER, "", 1).strip()
                suggestion = parts[1].strip()
                return StructuredSuggestion(reason=reason, suggestion=suggestion)

            logger.debug(f"Malformed reasoned response ({len(parts)} parts), using bare suggestion")

        if raw.strip() == original.strip():
            return NoChange()

        return BareSuggestion(suggestion=raw)

    def has_markers(self, raw: str) -> bool:
        """Check whether a response carries both format markers."""
        return REASON_MARKER in raw and SUGGESTION_MARKER in raw
