"""
Property-based tests for oracle response parsing.

Property 3: Parsing is deterministic and the reason/suggestion format round-trips
Property 4: Echoed input never produces a comment
"""

import string

from hypothesis import assume, given, strategies as st

from docbuddy.llm.parser import ResponseParser
from docbuddy.models.suggestion import NoChange, StructuredSuggestion


field_text = st.text(alphabet=string.ascii_letters + string.digits + " .,;!?`*#-", min_size=1, max_size=80)


class TestResponseParsing:
    """Property tests for ResponseParser."""

    @given(raw=st.text(max_size=200), original=st.text(max_size=80))
    def test_parsing_is_idempotent(self, raw, original):
        """
        Property: Parsing the same response twice yields the same outcome.
        """
        parser = ResponseParser()
        
        assert parser.parse(raw, original) == parser.parse(raw, original)

    @given(reason=field_text, suggestion=field_text, original=field_text)
    def test_reason_suggestion_round_trip(self, reason, suggestion, original):
        """
        Property: "reason: R\\nsuggestion: S" parses to Structured(R, S).
        """
        assume(reason == reason.strip() and suggestion == suggestion.strip())
        
        outcome = ResponseParser().parse(f"reason: {reason}\nsuggestion: {suggestion}", original)
        
        assert outcome == StructuredSuggestion(reason=reason, suggestion=suggestion)

    @given(original=st.text(max_size=80), padding=st.sampled_from(["", " ", "\n", "  \t"]))
    def test_echoed_text_is_no_change(self, original, padding):
        """
        Property: An answer equal to the original (after trimming) means no change.
        """
        assume("reason:" not in original or "suggestion:" not in original)
        
        outcome = ResponseParser().parse(padding + original + padding, original)
        
        assert outcome == NoChange()
