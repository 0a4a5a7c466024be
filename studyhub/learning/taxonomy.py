"""
Keyword Taxonomy for topic detection.

Static lookup tables only:
- TOPIC_KEYWORDS: surface-form keywords per knowledge domain, matched as
  case-insensitive substrings of a post's title + content
- CONCEPT_PATTERNS: regexes that pick out technical nouns (knowledge points)
- Difficulty vocabularies (advanced vs beginner wording)
- CATEGORY_BUCKETS: ordered domain buckets used to label an analysis

Iteration order is significant. Topic extraction keeps the first matches in
the order listed here, and category assignment takes the first bucket hit.
"""

from __future__ import annotations

import re

# =============================================================================
# Topic Keywords (by domain)
# =============================================================================

TOPIC_KEYWORDS: dict[str, tuple[str, ...]] = {
    "ai_ml": (
        "machine learning", "deep learning", "neural network", "artificial intelligence",
        "tensorflow", "pytorch", "scikit-learn", "pandas", "numpy", "opencv",
        "computer vision", "natural language processing", "nlp", "reinforcement learning",
        "supervised learning", "unsupervised learning", "clustering", "classification",
        "regression", "feature engineering", "model training", "hyperparameter tuning",
    ),
    "languages": (
        "python", "javascript", "typescript", "react", "next.js", "node.js", "vue.js",
        "angular", "django", "flask", "express", "fastapi", "spring boot",
        "java", "c++", "c#", "go", "rust", "swift", "kotlin",
    ),
    "web": (
        "frontend", "backend", "full stack", "responsive design", "api", "rest api",
        "graphql", "websocket", "microservices", "serverless", "jwt", "oauth",
        "html", "css", "bootstrap", "tailwind", "sass", "less",
    ),
    "databases": (
        "database", "sql", "nosql", "mongodb", "postgresql", "mysql", "redis",
        "elasticsearch", "data modeling", "indexing", "query optimization",
    ),
    "cloud_devops": (
        "aws", "azure", "gcp", "docker", "kubernetes", "ci/cd", "jenkins",
        "terraform", "ansible", "monitoring", "logging", "scaling",
    ),
    "data_science": (
        "data analysis", "data visualization", "statistics", "probability",
        "data mining", "big data", "hadoop", "spark", "kafka",
    ),
    "software_engineering": (
        "design patterns", "clean code", "refactoring", "testing", "tdd",
        "agile", "scrum", "git", "version control", "code review",
    ),
    "mobile": (
        "mobile development", "ios", "android", "flutter", "react native",
        "swift", "kotlin", "xamarin", "cordova",
    ),
    "security": (
        "cybersecurity", "encryption", "authentication", "authorization",
        "vulnerability", "penetration testing", "ssl", "tls",
    ),
}


def all_topic_keywords() -> list[str]:
    """Flatten TOPIC_KEYWORDS in domain order, first occurrence wins."""
    seen: dict[str, None] = {}
    for keywords in TOPIC_KEYWORDS.values():
        for keyword in keywords:
            seen.setdefault(keyword, None)
    return list(seen)


# =============================================================================
# Concept Patterns (knowledge points)
# =============================================================================

# The knowledge point is the last whitespace-delimited token of each match:
# for trigger patterns that is the noun after the trigger word, for
# vocabulary patterns it is the (last word of the) term itself.
CONCEPT_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Trigger word followed by a named thing
    re.compile(r"\b(?:function|class|method|variable|constant|interface|type|enum)\s+(\w+)", re.IGNORECASE),
    re.compile(r"\b(?:algorithm|pattern|framework|library|tool|technology)\s+(\w+)", re.IGNORECASE),
    re.compile(r"\b(?:concept|principle|theory|approach|technique|strategy)\s+(\w+)", re.IGNORECASE),
    # Technical concepts
    re.compile(
        r"\b(?:algorithm|pattern|framework|library|tool|technology|method|technique|approach|"
        r"strategy|principle|concept|theory|model|architecture|design|implementation|"
        r"optimization|performance|scalability|security|testing|deployment|monitoring)\b",
        re.IGNORECASE,
    ),
    # Programming concepts
    re.compile(
        r"\b(?:function|class|method|variable|constant|interface|type|enum|object|array|"
        r"string|number|boolean|null|undefined|callback|promise|async|await|closure|scope|"
        r"hoisting|prototype|inheritance|polymorphism|encapsulation|abstraction)\b",
        re.IGNORECASE,
    ),
    # AI/ML concepts
    re.compile(
        r"\b(?:neural network|deep learning|machine learning|supervised|unsupervised|"
        r"reinforcement|classification|regression|clustering|feature|model|training|"
        r"validation|testing|overfitting|underfitting|bias|variance|gradient|optimization|"
        r"backpropagation|activation|loss|accuracy|precision|recall|f1-score|roc|auc)\b",
        re.IGNORECASE,
    ),
    # Web development concepts
    re.compile(
        r"\b(?:component|state|props|hook|lifecycle|routing|middleware|controller|service|"
        r"repository|entity|migration|seed|factory|singleton|observer|mvc|mvp|mvvm|spa|"
        r"ssr|csr|pwa|seo|accessibility|responsive|progressive)\b",
        re.IGNORECASE,
    ),
)


# =============================================================================
# Difficulty Vocabulary
# =============================================================================

ADVANCED_TOPICS: tuple[str, ...] = (
    "deep learning", "neural network", "reinforcement learning", "microservices",
    "kubernetes", "distributed", "concurrent", "asynchronous", "optimization",
    "scalability", "architecture", "enterprise", "production", "advanced",
    "machine learning", "tensorflow", "pytorch", "computer vision", "nlp",
    "docker", "aws", "azure", "gcp", "devops", "ci/cd", "monitoring",
)

ADVANCED_CONCEPTS: tuple[str, ...] = (
    "optimization", "performance", "scalability", "architecture", "enterprise",
    "microservices", "distributed", "concurrent", "asynchronous", "advanced",
    "complex", "sophisticated", "production-ready", "enterprise-grade",
    "algorithm", "pattern", "framework", "library", "tool", "technology",
    "method", "technique", "approach", "strategy", "principle", "concept",
)

BEGINNER_TOPICS: tuple[str, ...] = (
    "introduction", "getting started", "tutorial", "basics", "fundamentals",
    "beginner", "simple", "easy", "basic", "overview", "guide", "hello world",
)


# =============================================================================
# Category Buckets (priority order)
# =============================================================================

CATEGORY_BUCKETS: tuple[tuple[str, frozenset[str]], ...] = (
    ("AI/ML", frozenset({
        "machine learning", "deep learning", "neural network", "artificial intelligence",
        "tensorflow", "pytorch", "scikit-learn",
    })),
    ("Web Development", frozenset({
        "react", "next.js", "node.js", "vue.js", "angular", "frontend", "backend",
        "api", "web development",
    })),
    ("Data Science", frozenset({
        "data analysis", "data visualization", "pandas", "numpy", "statistics", "data science",
    })),
    ("Cloud/DevOps", frozenset({
        "aws", "azure", "gcp", "docker", "kubernetes", "cloud", "devops",
    })),
    ("Mobile Development", frozenset({
        "mobile development", "ios", "android", "flutter", "react native",
    })),
    ("Security", frozenset({
        "cybersecurity", "encryption", "authentication", "security",
    })),
)

DEFAULT_CATEGORY = "General Programming"


# =============================================================================
# Post Kind Signals (enhanced strategy)
# =============================================================================

# (kind, post types that imply it, content words that imply it)
POST_KIND_RULES: tuple[tuple[str, frozenset[str], tuple[str, ...]], ...] = (
    ("Documentation", frozenset({"PDF"}), ("document", "paper")),
    ("Tutorial", frozenset({"VIDEO"}), ("video", "tutorial")),
    ("Q&A", frozenset(), ("question", "help", "problem")),
    ("Project", frozenset(), ("project", "build", "create")),
    ("News", frozenset(), ("news", "update", "announcement")),
    ("Programming", frozenset(), ("code", "programming", "development")),
    ("AI/ML", frozenset(), ("ai", "machine learning", "neural")),
)

DEFAULT_POST_KIND = "General"
