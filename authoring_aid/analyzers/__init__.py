"""Text analysis: tokenization, readability and style checks."""

from .tokenizer import (
    tokenize_words,
    split_sentences,
    split_sentences_with_punctuation,
    count_sentences,
    count_syllables,
)
from .readability import (
    ReadabilityStats,
    analyze_readability,
    flesch_kincaid_grade,
)
from .style_checker import (
    StyleRules,
    Suggestion,
    SuggestionKind,
    SuggestionState,
    generate_suggestions,
    suggestion_state,
)

__all__ = [
    'tokenize_words',
    'split_sentences',
    'split_sentences_with_punctuation',
    'count_sentences',
    'count_syllables',
    'ReadabilityStats',
    'analyze_readability',
    'flesch_kincaid_grade',
    'StyleRules',
    'Suggestion',
    'SuggestionKind',
    'SuggestionState',
    'generate_suggestions',
    'suggestion_state',
]
