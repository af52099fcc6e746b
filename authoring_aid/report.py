"""Rich terminal report of contrast and text analysis results."""

from typing import Optional
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .engine.contrast_engine import ContrastResult, ContrastTier
from .engine.assistant import TextAnalysisResult
from .analyzers.style_checker import SuggestionState
from .formatting import (
    format_grade,
    format_ratio,
    format_reading_time,
    format_score,
    suggestions_message,
)


TIER_COLORS = {
    ContrastTier.FAIL: "red",
    ContrastTier.AA_LARGE: "yellow",
    ContrastTier.AA: "green",
    ContrastTier.AAA: "bold green",
}


def display_contrast(console: Console, result: ContrastResult):
    """Display a contrast rating panel."""
    color = TIER_COLORS[result.tier]
    console.print(Panel.fit(
        f"[{color}]{format_ratio(result.ratio)}[/{color}]\n"
        f"{result.status}\n"
        f"Foreground: {result.foreground}  Background: {result.background}",
        title="WCAG Contrast"
    ))


def display_text_analysis(console: Console, result: TextAnalysisResult):
    """Display readability metrics and suggestions."""
    stats = result.readability

    table = Table(title="Readability")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="bold")

    table.add_row("Grade Level", format_grade(stats))
    table.add_row("Flesch-Kincaid", format_score(stats.flesch_kincaid_score))
    table.add_row("Words", str(stats.word_count))
    table.add_row("Sentences", str(stats.sentence_count))
    table.add_row("Reading Time", format_reading_time(stats.estimated_reading_time_minutes))

    console.print(table)

    message = suggestions_message(result.state)
    if message is not None:
        style = "green" if result.state is SuggestionState.CLEAN else "dim"
        console.print(f"[{style}]{message}[/{style}]")
        return

    console.print("\n[bold red]Suggestions:[/bold red]")
    for i, suggestion in enumerate(result.suggestions, 1):
        console.print(f"{i}. [bold]{escape(suggestion.issue)}[/bold]")
        console.print(f"   [cyan]Tip: {suggestion.fix}[/cyan]")


def render_report(console: Console,
                  contrast: Optional[ContrastResult] = None,
                  text_result: Optional[TextAnalysisResult] = None):
    """Print whichever results are given."""
    if contrast is not None:
        display_contrast(console, contrast)
    if text_result is not None:
        display_text_analysis(console, text_result)
