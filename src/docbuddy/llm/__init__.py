"""
LLM Suggestion Engine

This module provides the oracle client, its fixed system instructions,
and the parser for its two-field responses.
"""

from .prompts import SystemInstructions, DEFAULT_SYSTEM_INSTRUCTIONS
from .parser import ResponseParser
from .oracle import OpenAIOracle

__all__ = ['SystemInstructions', 'DEFAULT_SYSTEM_INSTRUCTIONS', 'ResponseParser', 'OpenAIOracle']
