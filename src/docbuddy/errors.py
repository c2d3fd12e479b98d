"""
Error Types

DocBuddy 처리 과정에서 사용하는 예외 정의
"""


class DocBuddyError(Exception):
    """Base class for DocBuddy errors."""


class MalformedPatchError(DocBuddyError):
    """Patch text cannot be scanned into lines."""


class OracleError(DocBuddyError):
    """Text improvement oracle call failed"""
    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code
