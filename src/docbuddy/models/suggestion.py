"""
Suggestion Data Models

문서 개선 제안 및 리뷰 코멘트 관련 데이터 모델들
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Union
from pydantic import BaseModel, validator


@dataclass(frozen=True)
class StructuredSuggestion:
    """이유와 제안이 함께 있는 oracle 응답"""
    reason: str
    suggestion: str


@dataclass(frozen=True)
class BareSuggestion:
    """형식 없이 개선된 텍스트만 있는 oracle 응답"""
    suggestion: str


@dataclass(frozen=True)
class NoChange:
    """원문과 동일한 응답 (코멘트 생성 안 함)"""


ParsedOutcome = Union[StructuredSuggestion, BareSuggestion, NoChange]


@dataclass(frozen=True)
class ReviewTarget:
    """코멘트를 남길 PR 파일 식별자"""
    owner: str
    repo: str
    pull_number: int
    commit_id: str
    file_path: str

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass
class CommentRequest:
    """GitHub 리뷰 코멘트 요청"""
    file_path: str
    commit_id: str
    position: int
    body: str

    def __post_init__(self):
        """데이터 검증"""
        if self.position < 1:
            raise ValueError("Position must be at least 1")

        if not self.body.strip():
            raise ValueError("Comment body cannot be empty")


class LineOutcome(str, Enum):
    """라인별 처리 결과"""
    SUBMITTED = "submitted"
    SKIPPED_EMPTY = "skipped_empty"
    ORACLE_FAILED = "oracle_failed"
    NO_CHANGE = "no_change"
    SUBMISSION_FAILED = "submission_failed"
    FAILED = "failed"


@dataclass
class SuggestionReport:
    """파일 하나에 대한 제안 처리 결과"""
    file_path: str
    outcomes: List[LineOutcome] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def success_count(self) -> int:
        """성공적으로 등록된 코멘트 수"""
        if self.error:
            return 0
        return sum(1 for outcome in self.outcomes if outcome == LineOutcome.SUBMITTED)

    @property
    def candidate_count(self) -> int:
        return len(self.outcomes)

    def count(self, outcome: LineOutcome) -> int:
        """특정 결과의 라인 수 반환"""
        return sum(1 for o in self.outcomes if o == outcome)


@dataclass
class PullRequestSuggestionResult:
    """PR 전체 제안 처리 결과"""
    run_id: str
    repository: str
    pr_number: int
    status: str
    comments_by_file: Dict[str, int]
    processing_time: float
    created_at: datetime
    metadata: Dict = field(default_factory=dict)

    def __post_init__(self):
        """데이터 검증"""
        if self.processing_time < 0:
            raise ValueError("Processing time must be non-negative")

        valid_statuses = {'completed', 'failed'}
        if self.status not in valid_statuses:
            raise ValueError(f"Invalid status: {self.status}")

    @property
    def total_comments(self) -> int:
        """등록된 전체 코멘트 수"""
        return sum(self.comments_by_file.values())


# Pydantic models for API validation
class FileSuggestionRequest(BaseModel):
    """API 요청용 파일 단위 제안 모델"""
    owner: str
    repo: str
    pull_number: int
    commit_id: str
    file_path: str
    patch: str

    @validator('pull_number')
    def validate_pull_number(cls, v):
        if v <= 0:
            raise ValueError('PR number must be positive')
        return v

    @validator('owner', 'repo', 'commit_id', 'file_path')
    def validate_non_empty(cls, v):
        if not v.strip():
            raise ValueError('Field cannot be empty')
        return v.strip()

    def to_target(self) -> ReviewTarget:
        return ReviewTarget(
            owner=self.owner,
            repo=self.repo,
            pull_number=self.pull_number,
            commit_id=self.commit_id,
            file_path=self.file_path,
        )


class PullRequestSuggestionRequest(BaseModel):
    """API 요청용 PR 단위 제안 모델"""
    repository: str
    pr_number: int

    @validator('repository')
    def validate_repository(cls, v):
        if v.count('/') != 1 or not all(part.strip() for part in v.split('/')):
            raise ValueError('Repository must be in format "owner/repo"')
        return v

    @validator('pr_number')
    def validate_pr_number(cls, v):
        if v <= 0:
            raise ValueError('PR number must be positive')
        return v

    @property
    def owner(self) -> str:
        return self.repository.split('/')[0]

    @property
    def repo(self) -> str:
        return self.repository.split('/')[1]
