"""
Typer CLI for the studyhub learning-content pipeline.

Commands:
    studyhub generate --posts posts.json       - Flashcards + quiz from community posts
    studyhub generate --topic genai            - Flashcards + quiz for a predefined topic
    studyhub topics                            - List predefined topics
    studyhub analyze posts.json                - Show topic analysis per post
    studyhub summary posts.json                - Daily community summary

Posts files hold a JSON array of post records (or an object with a "posts"
array) in the platform's shape.

Usage:
    studyhub --help
    studyhub generate --posts posts.json --quiz 5 --difficulty hard --strategy enhanced
    studyhub generate --topic "Machine Learning" --json
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import typer
from loguru import logger
from rich import print as rprint
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config import get_settings

from ..community.summary import compute_stats, generate_daily_summary
from ..errors import ContentGenerationError
from ..generation.cache import get_default_cache
from ..generation.orchestrator import LearningContentOrchestrator
from ..generation.strategies import Strategy
from ..learning.analyzer import TopicAnalyzer
from ..learning.models import QUIZ_DIFFICULTIES, LearningContent, Post
from ..learning.topics import get_available_topics

app = typer.Typer(
    help="studyhub CLI: community posts -> flashcards, quizzes and summaries",
    no_args_is_help=True,
)

console = Console()


def configure_logging(verbose: bool = False) -> None:
    """Route loguru output to stderr (and optionally a file) at the configured level."""
    settings = get_settings()
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else settings.log_level,
        format="<level>{message}</level>",
    )
    if settings.log_file:
        logger.add(
            settings.log_file,
            level="DEBUG",
            rotation="10 MB",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
        )


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Generate study material from learning-community content."""
    configure_logging(verbose)


def load_posts(path: Path) -> list[Post]:
    """Read posts from a JSON file, exiting with code 1 on unreadable input."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        rprint(f"[red]✗[/red] Posts file not found: {path}")
        raise typer.Exit(code=1)
    except json.JSONDecodeError as exc:
        rprint(f"[red]✗[/red] Posts file is not valid JSON: {exc}")
        raise typer.Exit(code=1)

    if isinstance(data, dict):
        data = data.get("posts", [])
    if not isinstance(data, list):
        rprint("[red]✗[/red] Expected a JSON array of posts")
        raise typer.Exit(code=1)

    return [Post.from_dict(item) for item in data if isinstance(item, dict)]


def _print_content(content: LearningContent) -> None:
    table = Table(title="Flashcards", show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Question", style="cyan")
    table.add_column("Answer")
    table.add_column("Difficulty", style="yellow")
    table.add_column("Source", style="dim")
    for index, card in enumerate(content.flashcards, start=1):
        table.add_row(str(index), card.question, card.answer, card.difficulty, card.source)
    console.print(table)

    for index, question in enumerate(content.quiz, start=1):
        options = "\n".join(
            f"{'[green]✓[/green]' if i == question.correct_answer else ' '} {chr(65 + i)}. {option}"
            for i, option in enumerate(question.options)
        )
        console.print(
            Panel(
                f"{options}\n\n[dim]{question.explanation}[/dim]",
                title=f"Q{index} [{question.difficulty}] {question.question}",
                title_align="left",
            )
        )


# ========================================
# Commands
# ========================================


@app.command()
def generate(
    posts_file: Path | None = typer.Option(None, "--posts", "-p", help="JSON file of community posts"),
    topic: str | None = typer.Option(None, "--topic", "-t", help="Predefined topic name"),
    quiz_count: int | None = typer.Option(None, "--quiz", "-q", help="Number of quiz questions"),
    flashcard_count: int | None = typer.Option(None, "--flashcards", "-f", help="Number of flashcards"),
    difficulty: str | None = typer.Option(
        None, "--difficulty", "-d", help="easy, medium, hard or mixed (strategy default if omitted)"
    ),
    strategy: Strategy = typer.Option(Strategy.BASIC, "--strategy", "-s", help="Generation strategy"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of tables"),
):
    """
    Generate flashcards and quiz questions.

    Use --posts for community content or --topic for a predefined topic.
    """
    settings = get_settings()
    if quiz_count is None:
        quiz_count = settings.default_quiz_count
    if flashcard_count is None:
        flashcard_count = settings.default_flashcard_count

    if (posts_file is None) == (topic is None):
        rprint("[red]✗[/red] Pass exactly one of --posts or --topic")
        raise typer.Exit(code=1)
    if not 1 <= quiz_count <= settings.max_quiz_count:
        rprint(f"[red]✗[/red] --quiz must be between 1 and {settings.max_quiz_count}")
        raise typer.Exit(code=1)
    if not 1 <= flashcard_count <= settings.max_flashcard_count:
        rprint(f"[red]✗[/red] --flashcards must be between 1 and {settings.max_flashcard_count}")
        raise typer.Exit(code=1)
    if difficulty is not None and difficulty.lower() not in QUIZ_DIFFICULTIES:
        rprint(f"[red]✗[/red] --difficulty must be one of: {', '.join(QUIZ_DIFFICULTIES)}")
        raise typer.Exit(code=1)

    if topic is not None:
        source = topic
        strategy = Strategy.PREDEFINED
    else:
        source = load_posts(posts_file)
        if strategy is Strategy.PREDEFINED:
            rprint("[red]✗[/red] The predefined strategy needs --topic")
            raise typer.Exit(code=1)

    orchestrator = LearningContentOrchestrator(cache=get_default_cache())
    if not settings.has_ai_configured() and not as_json:
        rprint("[yellow]No GEMINI_API_KEY set, using built-in sample content[/yellow]")

    try:
        content = asyncio.run(
            orchestrator.generate_learning_content(
                source,
                quiz_count=quiz_count,
                flashcard_count=flashcard_count,
                quiz_difficulty=difficulty.lower() if difficulty else None,
                strategy=strategy,
            )
        )
    except ContentGenerationError as exc:
        rprint(f"[red]✗[/red] {exc}")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(content.to_dict(), indent=2, ensure_ascii=False))
        return

    _print_content(content)
    rprint(
        f"\n[bold green]✓[/bold green] {len(content.flashcards)} flashcards, "
        f"{len(content.quiz)} quiz questions ({strategy.value} strategy)"
    )


@app.command()
def topics():
    """List predefined study topics."""
    table = Table(title="Predefined Topics", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Difficulty", style="yellow")
    table.add_column("Description")

    for topic in get_available_topics():
        table.add_row(topic.name, topic.category, topic.difficulty.value, topic.description)

    console.print(table)


@app.command()
def analyze(
    posts_file: Path = typer.Argument(..., help="JSON file of community posts"),
):
    """Show the topic analysis behind each post."""
    posts = load_posts(posts_file)
    if not posts:
        rprint("[yellow]No posts to analyze[/yellow]")
        return

    analyzer = TopicAnalyzer()
    table = Table(title="Topic Analysis", show_header=True)
    table.add_column("Post", style="cyan")
    table.add_column("Kind", style="dim")
    table.add_column("Topics")
    table.add_column("Knowledge Points")
    table.add_column("Difficulty", style="yellow")
    table.add_column("Category", style="magenta")

    for processed in analyzer.process_posts(posts):
        analysis = processed.analysis
        table.add_row(
            processed.post.title,
            processed.kind,
            ", ".join(analysis.main_topics) or "-",
            ", ".join(analysis.knowledge_points) or "-",
            analysis.difficulty.value,
            analysis.category,
        )

    console.print(table)


@app.command()
def summary(
    posts_file: Path = typer.Argument(..., help="JSON file of the day's community posts"),
):
    """Print a daily summary of community activity."""
    posts = load_posts(posts_file)
    stats = compute_stats(posts)

    table = Table(title="Community Activity", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right", style="green")
    table.add_row("Posts", str(stats.post_count))
    table.add_row("Authors", str(stats.author_count))
    table.add_row("Likes", str(stats.like_count))
    table.add_row("Comments", str(stats.comment_count))
    console.print(table)

    text = asyncio.run(generate_daily_summary(posts))
    console.print(Panel(text, title="Daily Summary", title_align="left"))


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
