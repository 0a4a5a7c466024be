"""
LLM Prompts for Learning Content Generation.

Contains a flashcard/quiz template pair for each generation strategy:
- Basic: raw post excerpts, plain instructional framing
- Enhanced: per-post analysis (topics, concepts, difficulty, summary)
- Simplified: topics and knowledge points only, skewed toward hard questions
- Predefined: a curated catalog topic instead of community posts

Plus single templates for the daily summary, post categorization and
resource discovery.

Templates use {name} placeholders filled by build_prompt(). The JSON
examples inside the templates contain literal braces, so str.format() is
not usable here.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


def build_prompt(template: str, substitutions: Mapping[str, Any]) -> str:
    """
    Fill every {name} placeholder in a template.

    Args:
        template: Prompt template text
        substitutions: Placeholder name -> value (converted with str())

    Returns:
        Rendered prompt. Placeholders without a substitution are left as-is.
        Substituted values are never expanded again, so braces in post text
        stay literal.
    """
    return PLACEHOLDER_PATTERN.sub(
        lambda match: str(substitutions[match[1]]) if match[1] in substitutions else match[0],
        template,
    )


# =============================================================================
# Basic Strategy
# =============================================================================

BASIC_FLASHCARD_PROMPT = """Based on these learning community posts, generate {count} educational flashcards:

POSTS:
{posts}

Create flashcards with:
- Clear, concise questions
- Detailed, educational answers
- Appropriate difficulty level (Easy/Medium/Hard)
- Relevant categories
- Source attribution

Return ONLY a JSON array with this structure:
[{"id":"1","question":"What is...?","answer":"Detailed explanation...","category":"AI","difficulty":"Easy","source":"Post title"}]

Make questions educational and test understanding of key concepts."""

BASIC_QUIZ_PROMPT = """Based on these learning community posts, generate {count} quiz questions:

POSTS:
{posts}

DIFFICULTY REQUIREMENT: {difficulty_instruction}

Create quiz questions with:
- Multiple choice questions (exactly 4 options each)
- One correct answer per question (correctAnswer is the 0-based option index)
- Detailed explanations
- Relevant categories
- Source attribution

Return ONLY a JSON array with this structure:
[{"id":"1","question":"What is the main purpose of...?","options":["A","B","C","D"],"correctAnswer":0,"explanation":"Why this is correct...","category":"AI","difficulty":"Easy","source":"Post title"}]

Make questions test understanding and application of concepts."""


# =============================================================================
# Enhanced Strategy
# =============================================================================

ENHANCED_FLASHCARD_PROMPT = """Based on these detailed community posts, generate {count} educational flashcards:

POSTS ANALYSIS:
{posts}

INSTRUCTIONS:
- Focus on the key topics and main concepts identified in each post
- Create questions that test understanding of the specific content shared
- Use the difficulty level and category information to guide question complexity
- Ensure questions are directly related to the actual post content
- Include source attribution to specific posts

Return JSON array: [{"id":"1","question":"Q?","answer":"A","category":"AI","difficulty":"Easy","source":"Post title","postId":"post_id"}]"""

ENHANCED_QUIZ_PROMPT = """Based on these detailed community posts, generate {count} {difficulty} quiz questions:

POSTS ANALYSIS:
{posts}

INSTRUCTIONS:
- Create questions that test understanding of the specific concepts discussed in the posts
- Use the key topics and main concepts to guide question creation
- Ensure questions are directly related to the actual post content
- Include detailed explanations that reference the source material
- Use the difficulty level to determine question complexity
- Include source attribution to specific posts
- Every question has exactly 4 options

Return JSON array: [{"id":"1","question":"Q?","options":["A","B","C","D"],"correctAnswer":0,"explanation":"E","category":"AI","difficulty":"Easy","source":"Post title","postId":"post_id"}]"""


# =============================================================================
# Simplified Strategy
# =============================================================================

SIMPLIFIED_FLASHCARD_PROMPT = """Based on these community discussion topics, generate {count} challenging educational flashcards:

DISCUSSION TOPICS:
{topics}

INSTRUCTIONS:
- Focus on the main topics and knowledge points identified
- Create DIFFICULT questions that test deep understanding and application of these topics
- Questions should challenge learners with complex scenarios, edge cases, and advanced concepts
- Test knowledge points like: implementation details, performance implications, best practices, common pitfalls, advanced techniques
- Use the difficulty level to guide question complexity, but lean towards harder questions
- Ensure questions are educational and test deep conceptual understanding
- Include source attribution to discussion topics

Return JSON array: [{"id":"1","question":"Q?","answer":"A","category":"AI","difficulty":"Hard","source":"Topic"}]"""

SIMPLIFIED_QUIZ_PROMPT = """Based on these community discussion topics, generate {count} CHALLENGING {difficulty} quiz questions:

DISCUSSION TOPICS:
{topics}

INSTRUCTIONS:
- Create DIFFICULT questions that test deep understanding and application of the identified topics and knowledge points
- Questions should challenge learners with complex scenarios, edge cases, and advanced concepts
- Test advanced knowledge points like: implementation details, performance implications, best practices, common pitfalls, advanced techniques, optimization strategies
- Use the difficulty level to guide question complexity, but lean towards harder questions
- Focus on conceptual understanding AND practical application
- Include detailed explanations that help learners understand the advanced concepts
- Include source attribution to discussion topics
- Make questions that require critical thinking and problem-solving skills

Return JSON array: [{"id":"1","question":"Q?","options":["A","B","C","D"],"correctAnswer":0,"explanation":"E","category":"AI","difficulty":"Hard","source":"Topic"}]"""


# =============================================================================
# Predefined Topic Strategy
# =============================================================================

PREDEFINED_FLASHCARD_PROMPT = """Generate {count} UNIQUE and CHALLENGING flashcards about {topic_name}:

TOPIC: {topic_name}
DESCRIPTION: {description}
KEYWORDS: {keywords}
KNOWLEDGE POINTS: {knowledge_points}
DIFFICULTY: {topic_difficulty}
GENERATION_ID: {generation_id}

INSTRUCTIONS:
- Create UNIQUE and DIVERSE flashcards that test different aspects of {topic_name}
- Each flashcard should focus on a DIFFERENT concept, technique, or application area
- Questions should challenge learners with complex scenarios, edge cases, and advanced concepts
- Test advanced knowledge points like: implementation details, performance implications, best practices, common pitfalls, advanced techniques
- Focus on practical application and real-world scenarios
- Include detailed answers that help learners understand the advanced concepts
- Use the specific keywords and knowledge points provided for this topic
- Vary the question types: concepts, implementation, best practices, troubleshooting

Return JSON array: [{"id":"1","question":"Q?","answer":"A","category":"{category}","difficulty":"{topic_difficulty}","source":"{topic_name}"}]"""

PREDEFINED_QUIZ_PROMPT = """Generate {count} UNIQUE and CHALLENGING quiz questions about {topic_name}:

TOPIC: {topic_name}
DESCRIPTION: {description}
KEYWORDS: {keywords}
KNOWLEDGE POINTS: {knowledge_points}
DIFFICULTY: {difficulty}
GENERATION_ID: {generation_id}

INSTRUCTIONS:
- Create UNIQUE and DIVERSE questions that test different aspects of {topic_name}
- Each question should focus on a DIFFERENT concept, technique, or application area
- Questions should challenge learners with complex scenarios, edge cases, and advanced concepts
- Test advanced knowledge points like: implementation details, performance implications, best practices, common pitfalls, advanced techniques, optimization strategies
- Include detailed explanations that help learners understand the advanced concepts
- Use the specific keywords and knowledge points provided for this topic
- AVOID using "All of the above" as an answer option
- Every question has exactly 4 options
- Vary the question types: concepts, implementation, best practices, troubleshooting

Return JSON array: [{"id":"1","question":"Q?","options":["A","B","C","D"],"correctAnswer":0,"explanation":"E","category":"{category}","difficulty":"{difficulty}","source":"{topic_name}"}]"""


# =============================================================================
# Community Prompts
# =============================================================================

DAILY_SUMMARY_PROMPT = """Create a structured daily summary for a learning community based on these posts:

POSTS DATA:
{posts}

STATISTICS:
- Total posts: {post_count}
- Unique authors: {author_count}
- Total likes: {like_count}
- Total comments: {comment_count}
- Top 3 most engaging posts: {top_posts}

Please structure your summary as follows:
1. **Community Activity Overview**: how many members posted how many posts today
2. **Main Discussion Topics**: the key topics being discussed
3. **Top 3 Most Popular Posts**: the most engaging posts with their engagement metrics
4. **Key Insights**: educational insights and learning takeaways
5. **Community Engagement**: the overall engagement level and participation

FORMATTING:
- Use bullet points (•) for each post summary
- Use clear section headers with **bold** formatting
- Keep each post summary concise but informative"""

CATEGORIZE_PROMPT = """Classify this educational content: "{title}" - "{content}".
Categories: {categories}.
Return only the category names, separated by commas."""

RESOURCES_PROMPT = """Find 3-5 relevant educational resources for the topic: {topic}

Return ONLY a JSON array of objects with "title", "description", "url" and "type" fields.
Include online courses, research papers, tutorials, tools, and books."""


def difficulty_instruction(difficulty: str) -> str:
    """Sentence describing the requested quiz difficulty."""
    if difficulty == "mixed":
        return "Mix of Easy, Medium, and Hard questions"
    return f"All questions should be {difficulty} difficulty"
