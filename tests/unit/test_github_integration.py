"""
Unit tests for the GitHub client and the oracle client.
"""

import pytest
from unittest.mock import Mock, patch
from datetime import datetime, timedelta
import requests
import time

from docbuddy.errors import OracleError
from docbuddy.github.client import GitHubAPIError, GitHubClient, RateLimitExceeded
from docbuddy.llm.oracle import OpenAIOracle


def make_response(status_code=200, json_data=None, headers=None):
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = json_data if json_data is not None else {}
    response.content = b"{}" if json_data is not None else b""
    response.headers = headers or {}
    return response


class TestGitHubClient:
    """Unit tests for GitHubClient class."""

    def test_client_initialization(self):
        """Test GitHubClient initialization."""
        token = "ghp_test_token_123456789"
        client = GitHubClient(token)
        
        assert client.token == token
        assert client.base_url == "https://api.github.com"
        assert client.session.headers["Authorization"] == f"token {token}"
        assert client.session.headers["Accept"] == "application/vnd.github.v3+json"

    def test_client_requires_token(self):
        """Test GitHubClient rejects a missing token."""
        with pytest.raises(ValueError):
            GitHubClient("")

        with pytest.raises(ValueError):
            GitHubClient(None)

    def test_create_review_comment(self):
        """Test creating an inline review comment."""
        client = GitHubClient("test_token", base_url="https://github.example.com/api/v3/")
        
        with patch.object(client.session, 'request') as mock_request:
            mock_request.return_value = make_response(201, {"id": 99})
            
            result = client.create_review_comment(
                "owner", "repo", 5, "```suggestion\nText\n```", "abc123", "docs/a.md", 3
            )
        
        assert result == {"id": 99}
        mock_request.assert_called_once()
        args, kwargs = mock_request.call_args
        assert args == ('POST', "https://github.example.com/api/v3/repos/owner/repo/pulls/5/comments")
        assert kwargs['json'] == {
            'body': "```suggestion\nText\n```",
            'commit_id': "abc123",
            'path': "docs/a.md",
            'position': 3,
        }
        assert kwargs['timeout'] == 30

    def test_create_review_comment_error(self):
        """Test that an API error is raised as GitHubAPIError."""
        client = GitHubClient("test_token")
        
        with patch.object(client.session, 'request') as mock_request:
            mock_request.return_value = make_response(422, {"message": "position is invalid"})
            
            with pytest.raises(GitHubAPIError) as exc_info:
                client.create_review_comment("o", "r", 1, "body", "sha", "a.md", 100)
        
        assert exc_info.value.status_code == 422
        assert "position is invalid" in str(exc_info.value)

    def test_request_exception_wrapped(self):
        """Test transport errors become GitHubAPIError."""
        client = GitHubClient("test_token")
        
        with patch.object(client.session, 'request', side_effect=requests.ConnectionError("refused")):
            with pytest.raises(GitHubAPIError):
                client.get_pull_request("o", "r", 1)

    def test_rate_limit_response(self):
        """Test a 429 response raises RateLimitExceeded."""
        client = GitHubClient("test_token")
        reset = str(int(time.time()) + 3600)
        
        with patch.object(client.session, 'request') as mock_request:
            mock_request.return_value = make_response(429, {}, {"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": reset})
            
            with pytest.raises(RateLimitExceeded):
                client.get_pull_request("o", "r", 1)
        
        assert client.rate_limit_remaining == 0

    def test_low_rate_limit_blocks_requests(self):
        """Test requests are refused while the quota is nearly exhausted."""
        client = GitHubClient("test_token")
        client.rate_limit_remaining = 5
        client.rate_limit_reset = datetime.now() + timedelta(hours=1)
        
        with patch.object(client.session, 'request') as mock_request:
            with pytest.raises(RateLimitExceeded):
                client.get_pull_request("o", "r", 1)
            mock_request.assert_not_called()

    def test_get_pull_request_files_paginates(self):
        """Test that PR files are collected across pages."""
        client = GitHubClient("test_token")
        first_page = [{"filename": f"f{i}.md"} for i in range(100)]
        second_page = [{"filename": "last.md"}]
        
        with patch.object(client.session, 'request') as mock_request:
            mock_request.side_effect = [make_response(200, first_page), make_response(200, second_page)]
            
            files = client.get_pull_request_files("o", "r", 1)
        
        assert len(files) == 101
        assert mock_request.call_args_list[1][1]['params'] == {'page': 2, 'per_page': 100}


class TestOpenAIOracle:
    """Unit tests for OpenAIOracle class."""

    def test_requires_api_key(self):
        """Test the oracle rejects a missing API key."""
        with pytest.raises(ValueError):
            OpenAIOracle(api_key="")

    def test_improve(self):
        """Test a successful completion call."""
        oracle = OpenAIOracle(api_key="sk-test", model="gpt-4")
        completion = {"choices": [{"message": {"content": "reason: R\nsuggestion: S"}}]}
        
        with patch.object(oracle.session, 'post', return_value=make_response(200, completion)) as mock_post:
            text = oracle.improve("system", "line text")
        
        assert text == "reason: R\nsuggestion: S"
        args, kwargs = mock_post.call_args
        assert args[0] == "https://api.openai.com/v1/chat/completions"
        assert kwargs['json'] == {
            "model": "gpt-4",
            "messages": [
                {"role": "system", "content": "system"},
                {"role": "user", "content": "line text"},
            ],
        }
        assert kwargs['timeout'] == 60

    def test_improve_is_single_attempt(self):
        """Test that a failed call is not retried."""
        oracle = OpenAIOracle(api_key="sk-test")
        
        with patch.object(oracle.session, 'post', return_value=make_response(503, {"error": {"message": "overloaded"}})) as mock_post:
            with pytest.raises(OracleError) as exc_info:
                oracle("system", "text")
        
        assert mock_post.call_count == 1
        assert exc_info.value.status_code == 503
        assert "overloaded" in str(exc_info.value)

    def test_transport_error(self):
        """Test transport errors become OracleError."""
        oracle = OpenAIOracle(api_key="sk-test")
        
        with patch.object(oracle.session, 'post', side_effect=requests.Timeout("timed out")):
            with pytest.raises(OracleError):
                oracle.improve("system", "text")

    def test_no_choices_returns_empty(self):
        """Test an answer without choices is empty text."""
        oracle = OpenAIOracle(api_key="sk-test")
        
        with patch.object(oracle.session, 'post', return_value=make_response(200, {"choices": []})):
            assert oracle.improve("system", "text") == ""
