"""Display strings for engine results.

The engines return structured data only; this module turns it into the
labels, messages and CSS class names a UI shows.
"""

from typing import Iterable, List, Optional

from .engine.contrast_engine import ContrastTier
from .analyzers.readability import ReadabilityStats
from .analyzers.style_checker import Suggestion, SuggestionState


CONTRAST_CSS_CLASSES = {
    ContrastTier.FAIL: "wcag-fail",
    ContrastTier.AA_LARGE: "wcag-warn",
    ContrastTier.AA: "wcag-pass",
    ContrastTier.AAA: "wcag-aaa",
}

EMPTY_TEXT_MESSAGE = (
    "Start typing and suggestions will appear here based on grammar, clarity, "
    "sentence length, and structure."
)
NO_ISSUES_MESSAGE = "No obvious grammar issues detected!"


def contrast_css_class(tier: ContrastTier) -> str:
    return CONTRAST_CSS_CLASSES[tier]


def format_ratio(ratio: float) -> str:
    return f"Ratio: {ratio:.2f}"


def format_score(score: Optional[float]) -> str:
    """Flesch-Kincaid score to 2 decimals; blank when there is no score."""
    if score is None:
        return ""
    return f"{score:.2f}"


def format_grade(stats: ReadabilityStats) -> str:
    if not stats.has_grade:
        return ""
    return str(stats.grade_level)


def format_reading_time(minutes: int) -> str:
    return f"{minutes} min"


def format_suggestion(suggestion: Suggestion) -> str:
    return f"{suggestion.issue}\nTip: {suggestion.fix}"


def suggestions_message(state: SuggestionState) -> Optional[str]:
    """Placeholder message for states that have no suggestions to list."""
    if state is SuggestionState.EMPTY:
        return EMPTY_TEXT_MESSAGE
    if state is SuggestionState.CLEAN:
        return NO_ISSUES_MESSAGE
    return None


def format_suggestions(suggestions: Iterable[Suggestion], state: SuggestionState) -> List[str]:
    """One display block per suggestion, or the placeholder message."""
    message = suggestions_message(state)
    if message is not None:
        return [message]
    return [format_suggestion(s) for s in suggestions]
