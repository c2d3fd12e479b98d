"""
GitHub Suggestion Formatter

Formats parsed oracle responses as GitHub review comment bodies
using fenced ```suggestion blocks.
"""

import logging

from ..models.suggestion import BareSuggestion, ParsedOutcome, StructuredSuggestion


logger = logging.getLogger(__name__)


class SuggestionCommentFormatter:
    """Builds Markdown comment bodies for GitHub suggestions."""

    def __init__(self):
        """Initialize formatter."""
        self.max_comment_length = 65536  # GitHub's comment limit

    def format(self, outcome: ParsedOutcome) -> str:
        """
        Format a parsed outcome as a comment body.

        Args:
            outcome: StructuredSuggestion or BareSuggestion

        Returns:
            Markdown comment body
        """
        if isinstance(outcome, StructuredSuggestion):
            body = self.format_reasoned(outcome.reason, outcome.suggestion)
        elif isinstance(outcome, BareSuggestion):
            body = self.format_bare(outcome.suggestion)
        else:
            raise ValueError(f"Nothing to format for {type(outcome).__name__}")

        if len(body) > self.max_comment_length:
            logger.warning(f"Comment body is {len(body)} chars, over GitHub's {self.max_comment_length} limit")

        return body

    def format_reasoned(self, reason: str, suggestion: str) -> str:
        """Format a suggestion with its reason."""
        return "\n".join([
            f"**Reason for improvement:** {reason}",
            "```suggestion",
            suggestion,
            "```",
        ])

    def format_bare(self, improved: str) -> str:
        """Format a suggestion block without a reason."""
        return "\n".join([
            "```suggestion",
            improved,
            "```",
        ])
