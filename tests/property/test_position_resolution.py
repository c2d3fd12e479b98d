"""
Property-based tests for patch scanning and position resolution.

Property 1: Candidate lines mirror the patch's added lines
Property 2: Positions are always at least 1 and never decrease within a hunk
"""

from hypothesis import given, strategies as st

from docbuddy.diff.scanner import DiffScanner
from docbuddy.diff.position import PositionResolver


line_text = st.text(alphabet=st.characters(blacklist_characters="\n\r"), max_size=40)

hunk_body_line = st.tuples(st.sampled_from([" ", "+", "-"]), line_text).map(lambda p: p[0] + p[1])

patch_line = st.one_of(
    hunk_body_line,
    st.builds(
        lambda a, b, c, d: f"@@ -{a},{b} +{c},{d} @@",
        st.integers(0, 500), st.integers(0, 50), st.integers(0, 500), st.integers(0, 50)
    ),
    line_text,
)


class TestCandidateScanning:
    """Property tests for DiffScanner."""

    @given(lines=st.lists(patch_line, max_size=60))
    def test_candidates_match_added_lines(self, lines):
        """
        Property: Every '+' line (except '+++') becomes exactly one candidate.
        
        Given: An arbitrary sequence of patch lines
        When: The joined patch is scanned
        Then: Candidates are the added lines, in order, with one marker stripped
        """
        candidates = DiffScanner().scan("\n".join(lines))
        
        expected = [
            (i, line[1:]) for i, line in enumerate(lines)
            if line.startswith("+") and not line.startswith("+++")
        ]
        assert [(c.patch_index, c.content) for c in candidates] == expected

    @given(lines=st.lists(st.tuples(st.sampled_from([" ", "-"]), line_text).map(lambda p: p[0] + p[1]), max_size=30))
    def test_patch_without_additions_has_no_candidates(self, lines):
        """
        Property: A patch of only context and removed lines has nothing to improve.
        """
        assert DiffScanner().scan(["@@ -1,5 +1,5 @@"] + lines) == []


class TestPositionResolution:
    """Property tests for PositionResolver."""

    @given(lines=st.lists(st.one_of(patch_line, st.text(max_size=20)), max_size=60), target=st.integers(-5, 80))
    def test_position_is_at_least_one(self, lines, target):
        """
        Property: Resolved positions are always >= 1, for any input.
        """
        assert PositionResolver().resolve(lines, target) >= 1

    @given(
        new_start=st.integers(1, 1000),
        body=st.lists(hunk_body_line, min_size=1, max_size=50),
        data=st.data()
    )
    def test_position_non_decreasing_within_hunk(self, new_start, body, data):
        """
        Property: Within one hunk the position never decreases as the index grows.
        """
        lines = [f"@@ -1,{len(body)} +{new_start},{len(body)} @@"] + body
        first = data.draw(st.integers(1, len(lines)))
        second = data.draw(st.integers(first, len(lines)))
        resolver = PositionResolver()
        
        assert resolver.resolve(lines, first) <= resolver.resolve(lines, second)
        assert resolver.resolve(lines, first) >= new_start

    @given(
        new_start=st.integers(1, 1000),
        body=st.lists(hunk_body_line, max_size=50)
    )
    def test_position_counts_non_removed_lines(self, new_start, body):
        """
        Property: Position equals the hunk start plus the non-removed lines before the target.
        """
        lines = [f"@@ -1,1 +{new_start},1 @@"] + body
        target = len(lines)
        
        kept = sum(1 for line in body if not line.startswith("-"))
        assert PositionResolver().resolve(lines, target) == new_start + kept
