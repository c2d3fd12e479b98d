#!/usr/bin/env python3
"""
Suggestion Pipeline Demo

Runs the suggestion pipeline over a patch file and prints the review
comments that would be posted, without touching GitHub.

Usage:
    python examples/suggestion_demo.py [patch_file] [file_path]

Uses the OpenAI-compatible oracle when OPENAI_API_KEY is set, and a
canned offline oracle otherwise.
"""

import sys
import os
import logging

from docbuddy.diff.scanner import DiffScanner
from docbuddy.llm.oracle import OpenAIOracle
from docbuddy.llm.prompts import SystemInstructions
from docbuddy.models.suggestion import ReviewTarget
from docbuddy.suggestions.pipeline import SuggestionPipeline


SAMPLE_PATCH = """@@ -1,4 +1,5 @@
 # Getting Started
-install the package with pip
+install the package with pip and then you can run it
+
 ## Usage
+this command it prints the help"""


def setup_logging():
    """Set up logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def offline_oracle(system_instructions: str, input_text: str) -> str:
    """Canned oracle that capitalizes the line and adds a full stop."""
    improved = input_text.strip()
    improved = improved[:1].upper() + improved[1:]
    if not improved.endswith('.'):
        improved += '.'
    return f"reason: Sentences should start with a capital letter and end with a period.\nsuggestion: {improved}"


def print_comment(owner, repo, pr_number, body, commit_id, file_path, position):
    """Comment sink that prints instead of posting."""
    print(f"\n💬 {file_path} @ position {position}")
    print(body)


def main():
    """Main demo function."""
    setup_logging()

    if len(sys.argv) > 1:
        with open(sys.argv[1], 'r', encoding='utf-8') as f:
            patch = f.read()
    else:
        patch = SAMPLE_PATCH

    file_path = sys.argv[2] if len(sys.argv) > 2 else "README.md"

    api_key = os.getenv('OPENAI_API_KEY')
    if api_key:
        oracle = OpenAIOracle(api_key=api_key, model=os.getenv('ORACLE_MODEL', 'gpt-4'))
    else:
        print("OPENAI_API_KEY not set, using the offline oracle")
        oracle = offline_oracle

    target = ReviewTarget(
        owner="demo",
        repo="docs",
        pull_number=1,
        commit_id="0000000",
        file_path=file_path
    )

    candidates = DiffScanner().scan(patch)
    print(f"🔍 Found {len(candidates)} candidate lines")

    pipeline = SuggestionPipeline(system_instructions=SystemInstructions.default())
    report = pipeline.process(patch, candidates, oracle, print_comment, target)

    print(f"\n✅ {report.success_count} suggestions created")
    for outcome in sorted(set(report.outcomes), key=lambda o: o.value):
        print(f"   - {outcome.value}: {report.count(outcome)}")


if __name__ == '__main__':
    main()
