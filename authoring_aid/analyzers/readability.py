"""Readability statistics built on the Flesch-Kincaid grade formula."""

import math
from dataclasses import dataclass
from typing import Optional
from loguru import logger

from .tokenizer import tokenize_words, count_sentences, count_syllables


DEFAULT_WORDS_PER_MINUTE = 200
DEFAULT_GAUGE_MAX_GRADE = 15


@dataclass(frozen=True)
class ReadabilityStats:
    """Readability of a text snapshot.

    ``flesch_kincaid_score`` and ``grade_level`` are None when the text has
    no words, in which case no grade is computed at all.
    """
    word_count: int
    sentence_count: int
    syllable_count: int
    flesch_kincaid_score: Optional[float]
    grade_level: Optional[int]
    estimated_reading_time_minutes: int
    gauge_max_grade: int = DEFAULT_GAUGE_MAX_GRADE

    @property
    def has_grade(self) -> bool:
        return self.grade_level is not None

    @property
    def gauge_position(self) -> float:
        return gauge_position(self.grade_level, self.gauge_max_grade)


def flesch_kincaid_grade(word_count: int, sentence_count: int, syllable_count: int) -> float:
    """Flesch-Kincaid grade level.

    Args:
        word_count: Number of words, must be positive
        sentence_count: Number of sentences, must be positive
        syllable_count: Total syllables across all words

    Returns:
        The raw (unrounded) grade score
    """
    if word_count <= 0:
        raise ValueError("Flesch-Kincaid grade needs at least one word")
    if sentence_count <= 0:
        raise ValueError("Flesch-Kincaid grade needs at least one sentence")

    return (
        0.39 * (word_count / sentence_count)
        + 11.8 * (syllable_count / word_count)
        - 15.59
    )


def grade_level(score: float) -> int:
    """Round half up and clamp at zero."""
    return max(0, math.floor(score + 0.5))


def estimated_reading_time(word_count: int, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    """Whole minutes needed to read ``word_count`` words."""
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive")
    if word_count <= 0:
        return 0
    return math.ceil(word_count / words_per_minute)


def gauge_position(level: Optional[int], max_grade: int = DEFAULT_GAUGE_MAX_GRADE) -> float:
    """Position of a grade on a 0-100 gauge, saturating at ``max_grade``."""
    if max_grade <= 0:
        raise ValueError("max_grade must be positive")
    if level is None:
        return 0.0
    return min(level, max_grade) / max_grade * 100


def analyze_readability(text: str,
                        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
                        gauge_max_grade: int = DEFAULT_GAUGE_MAX_GRADE) -> ReadabilityStats:
    """Compute word, sentence and syllable counts and the grade for ``text``."""
    words = tokenize_words(text)
    word_count = len(words)
    sentence_count = count_sentences(text)
    syllable_count = sum(count_syllables(word) for word in words)

    if word_count == 0:
        score = None
        level = None
    else:
        score = flesch_kincaid_grade(word_count, sentence_count, syllable_count)
        level = grade_level(score)

    logger.debug(
        f"Readability: {word_count} words, {sentence_count} sentences, "
        f"{syllable_count} syllables, grade {level}"
    )

    return ReadabilityStats(
        word_count=word_count,
        sentence_count=sentence_count,
        syllable_count=syllable_count,
        flesch_kincaid_score=score,
        grade_level=level,
        estimated_reading_time_minutes=estimated_reading_time(word_count, words_per_minute),
        gauge_max_grade=gauge_max_grade,
    )
