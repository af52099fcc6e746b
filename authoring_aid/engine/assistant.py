"""Authoring assistant that binds the contrast and text engines to configuration."""

from dataclasses import dataclass
from typing import Optional, Tuple
from loguru import logger

from ..config import Config, get_config
from ..analyzers.readability import ReadabilityStats, analyze_readability
from ..analyzers.style_checker import (
    StyleRules,
    Suggestion,
    SuggestionState,
    generate_suggestions,
    suggestion_state,
)
from .color import Color, ColorLike, InvalidColorFormat
from .contrast_engine import (
    ContrastResult,
    FixDirection,
    analyze_contrast,
    suggest_contrast_fix,
)


@dataclass(frozen=True)
class TextAnalysisResult:
    """Readability and style findings for one text snapshot."""
    text_length: int
    readability: ReadabilityStats
    suggestions: Tuple[Suggestion, ...]
    state: SuggestionState

    @property
    def is_empty(self) -> bool:
        return self.state is SuggestionState.EMPTY


class AuthoringAssistant:
    """Entry point a presentation layer calls on every color or text change.

    The assistant keeps only its configuration; each call recomputes its
    result from the arguments alone.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or get_config()
        self.style_rules = StyleRules(
            max_sentence_length=self.config.style.max_sentence_length,
            allowed_token_characters=self.config.style.allowed_token_characters,
        )

    def check_contrast(self, foreground: ColorLike, background: ColorLike) -> ContrastResult:
        """Rate a foreground/background pair, rejecting malformed colors."""
        try:
            return analyze_contrast(foreground, background)
        except InvalidColorFormat as e:
            logger.warning(f"Rejected color pair {foreground!r} / {background!r}: {e}")
            raise

    def suggest_fix(self, foreground: ColorLike, background: ColorLike,
                    direction: FixDirection) -> Optional[Color]:
        """Darker or lighter foreground that meets the configured target ratio."""
        return suggest_contrast_fix(
            foreground, background, direction,
            target_ratio=self.config.contrast.fix_target_ratio,
        )

    def analyze_text(self, text: str) -> TextAnalysisResult:
        """Readability statistics and style suggestions for ``text``."""
        readability = analyze_readability(
            text,
            words_per_minute=self.config.readability.words_per_minute,
            gauge_max_grade=self.config.readability.gauge_max_grade,
        )
        suggestions = generate_suggestions(text, self.style_rules)
        state = suggestion_state(text, suggestions)

        logger.debug(
            f"Analyzed {len(text)} characters: grade {readability.grade_level}, "
            f"{len(suggestions)} suggestions ({state.value})"
        )

        return TextAnalysisResult(
            text_length=len(text),
            readability=readability,
            suggestions=tuple(suggestions),
            state=state,
        )
