"""
DocBuddy Backend

GitHub Pull Request 문서 변경사항에 대한 줄 단위 개선 제안 시스템
"""

__version__ = "1.0.0"
__author__ = "Hwahae Team"
__email__ = "dev@hwahae.co.kr"

from .api import DocBuddyAPI

__all__ = ["DocBuddyAPI"]
