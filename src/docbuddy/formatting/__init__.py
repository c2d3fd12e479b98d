"""
Comment Formatting

This module formats improvement suggestions as GitHub review comments.
"""

from .github import SuggestionCommentFormatter

__all__ = ['SuggestionCommentFormatter']
