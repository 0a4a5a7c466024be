"""Unit tests for the predefined topic catalog."""

import pytest

from studyhub.errors import StudyhubError, TopicNotFoundError
from studyhub.learning.models import AnalysisDifficulty
from studyhub.learning.topics import PREDEFINED_TOPICS, find_topic, get_available_topics


class TestCatalog:
    def test_four_topics(self):
        names = [topic.name for topic in get_available_topics()]
        assert names == [
            "Generative AI (genAI)",
            "Machine Learning Fundamentals",
            "Web Development (Full Stack)",
            "Data Science & Analytics",
        ]

    def test_listing_is_a_copy(self):
        topics = get_available_topics()
        topics.clear()
        assert len(get_available_topics()) == len(PREDEFINED_TOPICS)

    def test_definitions_are_complete(self):
        for topic in PREDEFINED_TOPICS:
            assert topic.keywords
            assert topic.knowledge_points
            assert topic.difficulty == AnalysisDifficulty.ADVANCED

    def test_to_dict(self):
        data = PREDEFINED_TOPICS[0].to_dict()
        assert data["difficulty"] == "advanced"
        assert isinstance(data["knowledgePoints"], list)


class TestFindTopic:
    def test_exact_name(self):
        assert find_topic("Generative AI (genAI)").name == "Generative AI (genAI)"

    def test_case_insensitive(self):
        assert find_topic("machine learning fundamentals").name == "Machine Learning Fundamentals"

    def test_partial_name(self):
        assert find_topic("genai").name == "Generative AI (genAI)"
        assert find_topic("Web").category == "Web Development"

    def test_unknown_topic(self):
        with pytest.raises(TopicNotFoundError) as exc_info:
            find_topic("Quantum Basket Weaving")

        assert exc_info.value.topic_name == "Quantum Basket Weaving"
        assert str(exc_info.value) == 'Topic "Quantum Basket Weaving" not found'

    def test_not_found_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            find_topic("nope")
        assert issubclass(TopicNotFoundError, StudyhubError)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name(self, name):
        with pytest.raises(TopicNotFoundError):
            find_topic(name)
