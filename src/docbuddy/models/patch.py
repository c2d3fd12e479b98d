"""
Patch Data Models

Unified diff patch 관련 데이터 모델들
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CandidateLine:
    """개선 대상이 되는 추가/수정 라인"""
    patch_index: int
    content: str

    def __post_init__(self):
        """데이터 검증"""
        if self.patch_index < 0:
            raise ValueError("Patch index must be non-negative")


@dataclass(frozen=True)
class HunkAnchor:
    """특정 patch 위치 직전의 hunk header 기준점"""
    start_line: int

    @property
    def has_header(self) -> bool:
        """hunk header가 발견되었는지 여부"""
        return self.start_line > 0
