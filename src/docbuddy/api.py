"""
Main DocBuddy API

Main interface that ties patch scanning, the suggestion pipeline and
GitHub together, for a single file or for a whole pull request.
"""

import logging
from typing import Dict, List, Optional
from datetime import datetime

from .config import AppConfig, get_config
from .diff.scanner import DiffScanner
from .github.client import GitHubClient
from .llm.oracle import OpenAIOracle
from .llm.prompts import SystemInstructions
from .models.suggestion import (
    PullRequestSuggestionResult,
    ReviewTarget,
    SuggestionReport,
)
from .suggestions.pipeline import CommentSink, Oracle, SuggestionPipeline


logger = logging.getLogger(__name__)


class DocBuddyAPI:
    """
    Main DocBuddy API interface.

    Orchestrates the suggestion process:
    1. Collect the documentation files changed in a PR
    2. Scan each file's patch for added lines
    3. Ask the oracle for an improvement per line
    4. Post each suggestion as an inline review comment
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        github_client: Optional[GitHubClient] = None,
        oracle: Optional[Oracle] = None,
        comment_sink: Optional[CommentSink] = None
    ):
        """
        Initialize DocBuddy API.

        Args:
            config: Optional configuration object
            github_client: GitHub client (built from config if omitted)
            oracle: improve(system_instructions, input_text) callable
            comment_sink: Review comment callable (defaults to the GitHub client)
        """
        self.config = config or get_config()

        logger.info("Initializing DocBuddy API components...")

        if self.config.suggestions.prompt_file:
            instructions = SystemInstructions.from_file(self.config.suggestions.prompt_file)
        else:
            instructions = SystemInstructions.default()

        self.scanner = DiffScanner()
        self.pipeline = SuggestionPipeline(system_instructions=instructions)

        self.github_client = github_client or GitHubClient(
            token=self.config.github.token,
            base_url=self.config.github.api_base_url,
            timeout_seconds=self.config.github.timeout_seconds
        )
        self.oracle = oracle or OpenAIOracle(
            api_key=self.config.oracle.api_key,
            model=self.config.oracle.model,
            base_url=self.config.oracle.api_base_url,
            timeout_seconds=self.config.oracle.timeout_seconds
        )
        self.comment_sink = comment_sink or self.github_client.create_review_comment

        logger.info("DocBuddy API initialized successfully")

    def suggest_for_file(
        self,
        owner: str,
        repo: str,
        pull_number: int,
        commit_id: str,
        file_path: str,
        patch: str
    ) -> int:
        """
        Create suggestion comments for one file's patch.

        Returns:
            Number of comments submitted (0 on any top-level failure)
        """
        target = ReviewTarget(
            owner=owner,
            repo=repo,
            pull_number=pull_number,
            commit_id=commit_id,
            file_path=file_path
        )
        return self.process_file(target, patch).success_count

    def process_file(self, target: ReviewTarget, patch: str) -> SuggestionReport:
        """
        Create suggestion comments for one file and report per-line outcomes.

        Args:
            target: PR file identifiers
            patch: Unified diff patch of the file

        Returns:
            SuggestionReport (error set when the patch could not be processed)
        """
        try:
            candidates = self.scanner.scan(patch)
        except Exception as e:
            logger.error(f"Error analyzing patch for {target.file_path}: {e}")
            return SuggestionReport(file_path=target.file_path, error=str(e))

        if not candidates:
            logger.info(f"No documentation lines found to improve in {target.file_path}")
            return SuggestionReport(file_path=target.file_path)

        logger.info(f"Found {len(candidates)} lines to improve in file {target.file_path}")
        return self.pipeline.process(patch, candidates, self.oracle, self.comment_sink, target)

    def review_pull_request(self, repository: str, pr_number: int) -> PullRequestSuggestionResult:
        """
        Create suggestion comments for every documentation file in a PR.

        Args:
            repository: Repository in 'owner/repo' format
            pr_number: Pull request number

        Returns:
            PullRequestSuggestionResult with per-file comment counts
        """
        start_time = datetime.now()
        run_id = f"{repository}_{pr_number}_{int(start_time.timestamp())}"

        logger.info(f"Starting suggestion run: {run_id}")

        try:
            owner, repo = repository.split('/')

            pr_data = self.github_client.get_pull_request(owner, repo, pr_number)
            commit_id = pr_data['head']['sha']
            files_data = self.github_client.get_pull_request_files(owner, repo, pr_number)
            doc_files = self.select_documentation_files(files_data)

            comments_by_file: Dict[str, int] = {}
            for file_data in doc_files:
                target = ReviewTarget(
                    owner=owner,
                    repo=repo,
                    pull_number=pr_number,
                    commit_id=commit_id,
                    file_path=file_data['filename']
                )
                report = self.process_file(target, file_data['patch'])
                comments_by_file[target.file_path] = report.success_count

            processing_time = (datetime.now() - start_time).total_seconds()
            result = PullRequestSuggestionResult(
                run_id=run_id,
                repository=repository,
                pr_number=pr_number,
                status="completed",
                comments_by_file=comments_by_file,
                processing_time=processing_time,
                created_at=start_time,
                metadata={
                    'commit_id': commit_id,
                    'files_changed': len(files_data),
                    'documentation_files': len(doc_files),
                }
            )

            logger.info(f"Suggestion run completed: {run_id} ({result.total_comments} comments, {processing_time:.2f}s)")
            return result

        except Exception as e:
            logger.error(f"Suggestion run failed: {run_id} - {e}")

            processing_time = (datetime.now() - start_time).total_seconds()
            return PullRequestSuggestionResult(
                run_id=run_id,
                repository=repository,
                pr_number=pr_number,
                status="failed",
                comments_by_file={},
                processing_time=processing_time,
                created_at=start_time,
                metadata={"error": str(e)}
            )

    def select_documentation_files(self, files_data: List[Dict]) -> List[Dict]:
        """
        Filter PR files down to documentation files with a patch.

        Args:
            files_data: File entries from the GitHub PR files API

        Returns:
            Entries worth scanning, in API order
        """
        extensions = self.config.suggestions.file_extensions
        selected = []

        for file_data in files_data:
            if file_data.get('status') == 'removed':
                continue

            # Binary and very large files come without a patch
            if not file_data.get('patch'):
                continue

            if not file_data.get('filename', '').lower().endswith(extensions):
                continue

            selected.append(file_data)

        logger.info(f"Filtered to {len(selected)} documentation files")
        return selected
