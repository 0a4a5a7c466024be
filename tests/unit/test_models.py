"""
Unit tests for the learning-content data model.

Covers platform record parsing, the quiz option invariant and the camelCase
serialization the web layer expects.
"""

from datetime import datetime

import pytest

from studyhub.learning.models import (
    Flashcard,
    LearningContent,
    Post,
    PostType,
    QuizQuestion,
    card_difficulty,
)


def _quiz(**overrides):
    data = dict(
        id="1",
        question="Which layer routes packets?",
        options=["Physical", "Data Link", "Network", "Transport"],
        correct_answer=2,
        explanation="Routing happens at the network layer.",
        category="Networking",
        difficulty="Easy",
        source="Test",
    )
    data.update(overrides)
    return QuizQuestion(**data)


class TestPostFromDict:
    """Tests for Post.from_dict."""

    def test_platform_shape(self, platform_post_record):
        post = Post.from_dict(platform_post_record)

        assert post.id == "clx123"
        assert post.type == PostType.PDF
        assert post.author_name == "Grace"
        assert post.categories == ("AI Course",)
        assert post.like_count == 5
        assert post.comment_count == 2
        assert post.engagement == 7
        assert isinstance(post.created_at, datetime)
        assert post.created_at.year == 2024

    def test_flat_shape_and_defaults(self):
        post = Post.from_dict({"id": 7, "title": "Untitled", "like_count": 2})

        assert post.id == "7"
        assert post.type == PostType.TEXT
        assert post.content is None
        assert post.text == ""
        assert post.author_name is None
        assert post.engagement == 2

    def test_unknown_type_falls_back_to_text(self):
        post = Post.from_dict({"id": "x", "title": "t", "type": "HOLOGRAM"})
        assert post.type == PostType.TEXT

    def test_bad_date_is_dropped(self):
        post = Post.from_dict({"id": "x", "title": "t", "createdAt": "yesterday"})
        assert post.created_at is None

    def test_join_table_categories(self):
        post = Post.from_dict(
            {
                "id": "x",
                "title": "t",
                "categories": [{"category": {"name": "Essay"}}, {"category": None}, {"name": None}],
            }
        )
        assert post.categories == ("Essay",)


class TestCardDifficulty:
    """Tests for difficulty label normalization."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("easy", "Easy"),
            ("HARD", "Hard"),
            ("Medium", "Medium"),
            ("mixed", "Easy"),
            ("legendary", "Medium"),
            (None, "Medium"),
        ],
    )
    def test_normalization(self, value, expected):
        assert card_difficulty(value) == expected

    def test_custom_default(self):
        assert card_difficulty("", default="Hard") == "Hard"


class TestQuizQuestionInvariant:
    """Every quiz question has exactly four options and a valid answer index."""

    def test_valid_question(self):
        question = _quiz()
        assert len(question.options) == 4
        assert question.correct_answer == 2

    def test_three_options_rejected(self):
        with pytest.raises(ValueError, match="exactly 4 options"):
            _quiz(options=["A", "B", "C"])

    def test_five_options_rejected(self):
        with pytest.raises(ValueError):
            _quiz(options=["A", "B", "C", "D", "E"])

    @pytest.mark.parametrize("index", [-1, 4, 10])
    def test_answer_index_out_of_range(self, index):
        with pytest.raises(ValueError, match="out of range"):
            _quiz(correct_answer=index)


class TestQuizQuestionFromDict:
    """Tests for parsing quiz questions from model output."""

    def test_camel_case_record(self):
        question = QuizQuestion.from_dict(
            {
                "question": "Q?",
                "options": ["A", "B", "C", "D"],
                "correctAnswer": 3,
                "explanation": "E",
                "difficulty": "hard",
            },
            index=4,
            source_default="Generative AI (genAI)",
            category_default="AI/ML",
        )

        assert question.id == "5"
        assert question.correct_answer == 3
        assert question.difficulty == "Hard"
        assert question.source == "Generative AI (genAI)"
        assert question.category == "AI/ML"

    def test_boolean_answer_rejected(self):
        with pytest.raises(ValueError, match="integer"):
            QuizQuestion.from_dict({"question": "Q?", "options": ["A", "B", "C", "D"], "correctAnswer": True})

    def test_string_answer_rejected(self):
        with pytest.raises(ValueError):
            QuizQuestion.from_dict({"question": "Q?", "options": ["A", "B", "C", "D"], "correctAnswer": "0"})

    def test_missing_options_rejected(self):
        with pytest.raises(ValueError, match="list"):
            QuizQuestion.from_dict({"question": "Q?", "correctAnswer": 0})

    def test_missing_question_rejected(self):
        with pytest.raises(ValueError):
            QuizQuestion.from_dict({"options": ["A", "B", "C", "D"], "correctAnswer": 0})


class TestFlashcard:
    """Tests for Flashcard parsing and serialization."""

    def test_from_dict_requires_answer(self):
        with pytest.raises(ValueError):
            Flashcard.from_dict({"question": "What is Docker?"})

    def test_from_dict_defaults(self):
        card = Flashcard.from_dict({"question": "Q?", "answer": "A"}, index=0)

        assert card.id == "1"
        assert card.category == "General"
        assert card.difficulty == "Medium"
        assert card.post_id is None

    def test_to_dict_omits_missing_post_id(self):
        card = Flashcard(id="1", question="Q", answer="A", category="AI", difficulty="Easy", source="S")
        assert "postId" not in card.to_dict()

    def test_to_dict_includes_post_id(self):
        card = Flashcard(
            id="1", question="Q", answer="A", category="AI", difficulty="Easy", source="S", post_id="p1"
        )
        assert card.to_dict()["postId"] == "p1"


class TestLearningContent:
    """Tests for the combined output record."""

    def test_to_dict_shape(self):
        content = LearningContent(
            flashcards=[Flashcard(id="1", question="Q", answer="A", category="AI", difficulty="Easy", source="S")],
            quiz=[_quiz()],
        )

        data = content.to_dict()

        assert set(data) == {"flashcards", "quiz"}
        assert data["quiz"][0]["correctAnswer"] == 2
        assert data["flashcards"][0]["question"] == "Q"

    def test_empty_by_default(self):
        assert LearningContent().to_dict() == {"flashcards": [], "quiz": []}
