"""
Suggestion Processing

This module runs candidate patch lines through the oracle and
submits review comments for the useful answers.
"""

from .pipeline import SuggestionPipeline, Oracle, CommentSink

__all__ = ['SuggestionPipeline', 'Oracle', 'CommentSink']
