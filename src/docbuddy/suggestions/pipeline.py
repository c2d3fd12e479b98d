"""
Suggestion Pipeline

Runs every candidate line of a patch through the oracle and posts one
review comment per useful suggestion. Lines are processed one at a
time, in patch order, and a failure on one line never stops the rest.
"""

import logging
from typing import Callable, List, Optional, Sequence, Union

from ..diff.position import PositionResolver
from ..diff.scanner import split_patch
from ..formatting.github import SuggestionCommentFormatter
from ..llm.parser import ResponseParser
from ..llm.prompts import SystemInstructions
from ..models.patch import CandidateLine
from ..models.suggestion import (
    CommentRequest,
    LineOutcome,
    NoChange,
    ReviewTarget,
    SuggestionReport,
)


logger = logging.getLogger(__name__)

# improve(system_instructions, input_text) -> improved text
Oracle = Callable[[str, str], str]

# post(owner, repo, pr_number, body, commit_id, file_path, position)
CommentSink = Callable[[str, str, int, str, str, str, int], object]


class SuggestionPipeline:
    """
    Per-line suggestion pipeline.
    
    For each candidate line: skip blank content, ask the oracle,
    parse its answer, resolve the diff position and submit a comment.
    """
    
    def __init__(
        self,
        system_instructions: Optional[SystemInstructions] = None,
        parser: Optional[ResponseParser] = None,
        resolver: Optional[PositionResolver] = None,
        formatter: Optional[SuggestionCommentFormatter] = None
    ):
        """
        Initialize suggestion pipeline.
        
        Args:
            system_instructions: Instructions sent with every oracle call
            parser: Oracle response parser
            resolver: Diff position resolver
            formatter: Comment body formatter
        """
        self.system_instructions = system_instructions or SystemInstructions.default()
        self.parser = parser or ResponseParser()
        self.resolver = resolver or PositionResolver()
        self.formatter = formatter or SuggestionCommentFormatter()
    
    def run(
        self,
        patch: Union[str, List[str]],
        candidate_lines: Sequence[CandidateLine],
        oracle: Oracle,
        comment_sink: CommentSink,
        target: ReviewTarget
    ) -> int:
        """
        Process candidate lines and return how many comments were submitted.
        
        Never raises; a top-level failure yields 0.
        """
        return self.process(patch, candidate_lines, oracle, comment_sink, target).success_count
    
    def process(
        self,
        patch: Union[str, List[str]],
        candidate_lines: Sequence[CandidateLine],
        oracle: Oracle,
        comment_sink: CommentSink,
        target: ReviewTarget
    ) -> SuggestionReport:
        """
        Process candidate lines and report the outcome of each.
        
        Args:
            patch: Patch text (or its lines) the candidates came from
            candidate_lines: Lines produced by DiffScanner
            oracle: Text improvement callable
            comment_sink: Review comment submission callable
            target: PR file the comments belong to
            
        Returns:
            SuggestionReport with one outcome per candidate line
        """
        report = SuggestionReport(file_path=target.file_path)
        
        try:
            lines = split_patch(patch)
            
            for candidate in candidate_lines:
                try:
                    outcome = self._process_line(candidate, lines, oracle, comment_sink, target)
                except Exception as e:
                    logger.error(f"Error processing line {candidate.patch_index}: {e}")
                    outcome = LineOutcome.FAILED
                report.outcomes.append(outcome)
        
        except Exception as e:
            logger.error(f"Error creating suggestions for {target.file_path}: {e}")
            report.error = str(e)
            return report
        
        logger.info(f"Created {report.success_count} individual line suggestions for {target.file_path}")
        return report
    
    def _process_line(
        self,
        candidate: CandidateLine,
        lines: List[str],
        oracle: Oracle,
        comment_sink: CommentSink,
        target: ReviewTarget
    ) -> LineOutcome:
        """Process a single candidate line."""
        if not candidate.content.strip():
            return LineOutcome.SKIPPED_EMPTY
        
        try:
            text = oracle(str(self.system_instructions), candidate.content)
        except Exception as e:
            logger.error(f"AI generation error for line {candidate.patch_index}: {e}")
            return LineOutcome.ORACLE_FAILED
        
        if not text or not text.strip():
            logger.warning(f"Empty oracle response for line {candidate.patch_index}")
            return LineOutcome.ORACLE_FAILED
        
        parsed = self.parser.parse(text, candidate.content)
        if isinstance(parsed, NoChange):
            logger.debug(f"No change suggested for line {candidate.patch_index}")
            return LineOutcome.NO_CHANGE
        
        request = CommentRequest(
            file_path=target.file_path,
            commit_id=target.commit_id,
            position=self.resolver.resolve(lines, candidate.patch_index),
            body=self.formatter.format(parsed),
        )
        
        try:
            comment_sink(
                target.owner,
                target.repo,
                target.pull_number,
                request.body,
                request.commit_id,
                request.file_path,
                request.position,
            )
        except Exception as e:
            logger.error(f"Failed to create review comment at position {request.position}: {e}")
            return LineOutcome.SUBMISSION_FAILED
        
        logger.info(f"Created {type(parsed).__name__} comment for line at position {request.position}")
        return LineOutcome.SUBMITTED
