"""
Smoke Tests for CLI Commands.

These tests verify that CLI commands run without errors and produce output.
They don't validate correctness deeply - just that commands work.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

# Project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


def run_cli_command(args: list[str], timeout: int = 60) -> tuple[int, str, str]:
    """
    Run a CLI command and return exit code, stdout, stderr.

    Args:
        args: Arguments after 'python -m studyhub.cli.main'
        timeout: Maximum time to wait

    Returns:
        Tuple of (exit_code, stdout, stderr)
    """
    env = {**os.environ, "GEMINI_API_KEY": "", "COLUMNS": "200"}

    result = subprocess.run(
        [sys.executable, "-m", "studyhub.cli.main", *args],
        cwd=PROJECT_ROOT,
        env=env,
        capture_output=True,
        text=True,
        timeout=timeout,
    )

    return result.returncode, result.stdout, result.stderr


@pytest.fixture
def posts_file(tmp_path):
    """A posts file in the platform's JSON shape."""
    path = tmp_path / "posts.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": "p1",
                    "title": "Intro to Neural Networks",
                    "content": "A neural network learns weights with backpropagation.",
                    "type": "text",
                    "author": {"name": "Ada"},
                    "_count": {"likes": 3, "comments": 1},
                },
                {
                    "id": "p2",
                    "title": "Docker Basics",
                    "content": "Containers package an app with its dependencies.",
                    "type": "video",
                    "author": {"name": "Linus"},
                    "_count": {"likes": 1, "comments": 0},
                },
            ]
        )
    )
    return path


class TestCLIHelp:
    """Test that help commands work."""

    def test_main_help(self):
        code, stdout, stderr = run_cli_command(["--help"])

        assert code == 0, f"Help failed: {stderr}"
        assert "generate" in stdout
        assert "topics" in stdout

    def test_generate_help(self):
        code, stdout, stderr = run_cli_command(["generate", "--help"])

        assert code == 0, f"Generate help failed: {stderr}"
        assert "--topic" in stdout


class TestTopicsCommand:
    def test_lists_catalog(self):
        code, stdout, stderr = run_cli_command(["topics"])

        assert code == 0, f"Topics failed: {stderr}"
        assert "Predefined Topics" in stdout
        assert "genAI" in stdout


class TestGenerateCommand:
    def test_topic_json(self):
        code, stdout, stderr = run_cli_command(["generate", "--topic", "genai", "--json"])

        assert code == 0, f"Generate failed: {stderr}"
        assert "No GEMINI_API_KEY set" not in stdout
        payload = json.loads(stdout)
        assert len(payload["flashcards"]) == 3
        assert len(payload["quiz"]) == 3
        assert payload["quiz"][0]["source"] == "Generative AI (genAI)"

    def test_posts_json(self, posts_file):
        code, stdout, stderr = run_cli_command(
            ["generate", "--posts", str(posts_file), "--quiz", "2", "--flashcards", "2", "--json"]
        )

        assert code == 0, f"Generate failed: {stderr}"
        payload = json.loads(stdout)
        assert len(payload["flashcards"]) == 2
        assert len(payload["quiz"]) == 2

    def test_posts_table(self, posts_file):
        code, stdout, stderr = run_cli_command(["generate", "--posts", str(posts_file), "-s", "enhanced"])

        assert code == 0, f"Generate failed: {stderr}"
        assert "Flashcards" in stdout
        assert "enhanced strategy" in stdout
        assert "No GEMINI_API_KEY set" in stdout

    def test_requires_a_source(self):
        code, stdout, _ = run_cli_command(["generate"])

        assert code == 1
        assert "--posts or --topic" in stdout

    def test_rejects_quiz_count_out_of_range(self):
        code, _, _ = run_cli_command(["generate", "--topic", "genai", "--quiz", "21"])
        assert code == 1

    def test_missing_posts_file(self, tmp_path):
        code, stdout, _ = run_cli_command(["generate", "--posts", str(tmp_path / "absent.json")])

        assert code == 1
        assert "not found" in stdout


class TestPostCommands:
    def test_analyze(self, posts_file):
        code, stdout, stderr = run_cli_command(["analyze", str(posts_file)])

        assert code == 0, f"Analyze failed: {stderr}"
        assert "Topic Analysis" in stdout
        assert "Docker Basics" in stdout

    def test_summary(self, posts_file):
        code, stdout, stderr = run_cli_command(["summary", str(posts_file)])

        assert code == 0, f"Summary failed: {stderr}"
        assert "Community Activity" in stdout
        assert "Daily Summary" in stdout
