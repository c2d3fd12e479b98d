"""
Data Models

DocBuddy 시스템의 핵심 데이터 모델들
"""

from .patch import CandidateLine, HunkAnchor
from .suggestion import (
    StructuredSuggestion,
    BareSuggestion,
    NoChange,
    ParsedOutcome,
    ReviewTarget,
    CommentRequest,
    LineOutcome,
    SuggestionReport,
    PullRequestSuggestionResult,
    FileSuggestionRequest,
    PullRequestSuggestionRequest,
)

__all__ = [
    "CandidateLine",
    "HunkAnchor",
    "StructuredSuggestion",
    "BareSuggestion",
    "NoChange",
    "ParsedOutcome",
    "ReviewTarget",
    "CommentRequest",
    "LineOutcome",
    "SuggestionReport",
    "PullRequestSuggestionResult",
    "FileSuggestionRequest",
    "PullRequestSuggestionRequest",
]
