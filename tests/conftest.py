"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import get_settings
from studyhub.generation.cache import get_default_cache
from studyhub.learning.models import Post, PostType


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (no network, mocked model)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Never pick up a real API key, and reset cached settings and cache between tests."""
    monkeypatch.setenv("GEMINI_API_KEY", "")
    get_settings.cache_clear()
    get_default_cache.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_cache.cache_clear()


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


# ============================================================================
# Sample Data
# ============================================================================


@pytest.fixture
def sample_posts():
    """Three community posts on unrelated subjects."""
    return [
        Post(
            id="post-1",
            title="Intro to Transformers",
            content="Transformers use self-attention. The attention mechanism weighs every token against every other token.",
            author_name="Ada",
            like_count=12,
            comment_count=3,
        ),
        Post(
            id="post-2",
            title="Docker Basics",
            content="Containers package an app with its dependencies. Docker images are built from a Dockerfile.",
            type=PostType.VIDEO,
            author_name="Linus",
            like_count=4,
            comment_count=1,
        ),
        Post(
            id="post-3",
            title="K-means Clustering",
            content=None,
            author_name="Ada",
            like_count=7,
            comment_count=0,
        ),
    ]


@pytest.fixture
def platform_post_record():
    """A post as the platform API serializes it."""
    return {
        "id": "clx123",
        "title": "Understanding Gradient Descent",
        "content": "Gradient descent is an optimization algorithm used to train neural networks.",
        "type": "pdf",
        "createdAt": "2024-05-01T09:30:00Z",
        "author": {"name": "Grace"},
        "categories": [{"name": "AI Course"}],
        "_count": {"likes": 5, "comments": 2},
    }


@pytest.fixture
def valid_quiz_json():
    """Model output: a fenced JSON array with two valid quiz questions."""
    return """```json
[
  {"id": "1", "question": "What does self-attention compute?", "options": ["Token weights", "Pixel values", "Gradients", "Labels"], "correctAnswer": 0, "explanation": "It weighs tokens.", "category": "AI", "difficulty": "Medium", "source": "Intro to Transformers"},
  {"id": "2", "question": "What builds a Docker image?", "options": ["Makefile", "Dockerfile", "Jenkinsfile", "Procfile"], "correctAnswer": 1, "explanation": "Images come from a Dockerfile.", "category": "DevOps", "difficulty": "Easy", "source": "Docker Basics"}
]
```"""


@pytest.fixture
def valid_flashcard_json():
    """Model output: a bare JSON array with two valid flashcards."""
    return (
        '[{"id": "1", "question": "What is a container?", "answer": "A packaged app.", '
        '"category": "DevOps", "difficulty": "Easy", "source": "Docker Basics"}, '
        '{"id": "2", "question": "What is K-means?", "answer": "A clustering algorithm.", '
        '"category": "Data Science", "difficulty": "Medium", "source": "K-means Clustering"}]'
    )
