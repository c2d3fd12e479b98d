"""
GitHub Integration Layer

This module provides GitHub API integration for PR file retrieval
and inline review comment creation.
"""

from .client import GitHubClient, GitHubAPIError, RateLimitExceeded

__all__ = ['GitHubClient', 'GitHubAPIError', 'RateLimitExceeded']
