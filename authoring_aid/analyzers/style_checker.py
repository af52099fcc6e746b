"""Heuristic grammar and style checks that produce actionable suggestions."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
from loguru import logger

from .tokenizer import is_blank, tokenize_words, split_sentences_with_punctuation


DEFAULT_MAX_SENTENCE_LENGTH = 200
DEFAULT_ALLOWED_TOKEN_CHARACTERS = "a-zA-Z0-9.,!?'-"
TERMINAL_PUNCTUATION = ".!?"


class SuggestionKind(Enum):
    """Which check produced a suggestion."""
    SENTENCE_LENGTH = "sentence_length"
    CAPITALIZATION = "capitalization"
    PUNCTUATION = "punctuation"
    SPELLING = "spelling"


class SuggestionState(Enum):
    """Whether there is text to check and whether it produced findings."""
    EMPTY = "empty"
    CLEAN = "clean"
    HAS_FINDINGS = "has_findings"


@dataclass(frozen=True)
class Suggestion:
    """A single finding and the tip that resolves it."""
    issue: str
    fix: str
    kind: SuggestionKind
    sentence_number: Optional[int] = None
    token: Optional[str] = None


def validate_allowed_characters(value: str) -> str:
    """Check that ``value`` can be used as the body of a ``[^...]`` class.

    A leading ``^`` would negate the class twice and a trailing unescaped
    backslash would escape the closing bracket, so both are rejected.
    """
    if not value:
        raise ValueError("allowed token characters must not be empty")
    if value.startswith("^"):
        raise ValueError("allowed token characters must not start with '^'")
    trailing_backslashes = len(value) - len(value.rstrip("\\"))
    if trailing_backslashes % 2:
        raise ValueError("allowed token characters must not end with an unescaped backslash")
    try:
        re.compile(f"[^{value}]")
    except re.error as e:
        raise ValueError(f"invalid allowed token characters {value!r}: {e}") from e
    return value


@dataclass(frozen=True)
class StyleRules:
    """Tunable limits for the style checks.

    ``allowed_token_characters`` is the body of a regex character class; any
    token containing a character outside it is flagged.
    """
    max_sentence_length: int = DEFAULT_MAX_SENTENCE_LENGTH
    allowed_token_characters: str = DEFAULT_ALLOWED_TOKEN_CHARACTERS
    _disallowed: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        validate_allowed_characters(self.allowed_token_characters)
        object.__setattr__(
            self, '_disallowed', re.compile(f"[^{self.allowed_token_characters}]")
        )

    def is_suspicious_token(self, token: str) -> bool:
        return self._disallowed.search(token) is not None


DEFAULT_RULES = StyleRules()


def _check_sentence(sentence: str, number: int, rules: StyleRules) -> List[Suggestion]:
    findings = []

    if len(sentence) > rules.max_sentence_length:
        findings.append(Suggestion(
            issue=f"Sentence {number}: Too long.",
            fix="Consider splitting this sentence into two or more shorter sentences for clarity.",
            kind=SuggestionKind.SENTENCE_LENGTH,
            sentence_number=number,
        ))

    # Digits and punctuation are their own uppercase, so they pass
    first = sentence[:1]
    if first and first != first.upper():
        findings.append(Suggestion(
            issue=f"Sentence {number}: Should start with a capital letter.",
            fix="Capitalize the first letter of this sentence.",
            kind=SuggestionKind.CAPITALIZATION,
            sentence_number=number,
        ))

    if sentence[-1] not in TERMINAL_PUNCTUATION:
        findings.append(Suggestion(
            issue=f"Sentence {number}: Missing proper punctuation at the end.",
            fix="Add a period, exclamation mark, or question mark at the end.",
            kind=SuggestionKind.PUNCTUATION,
            sentence_number=number,
        ))

    return findings


def _check_token(token: str, rules: StyleRules) -> Optional[Suggestion]:
    if not rules.is_suspicious_token(token):
        return None
    return Suggestion(
        issue=f'Check spelling/format of: "{token}"',
        fix="Correct spelling or remove unusual characters.",
        kind=SuggestionKind.SPELLING,
        token=token,
    )


def generate_suggestions(text: str, rules: Optional[StyleRules] = None) -> List[Suggestion]:
    """Run sentence checks, then token checks, over ``text``.

    Sentence findings come first, grouped by sentence in the order length,
    capitalization, punctuation. Token findings follow in word order and
    are taken from the whole text, not per sentence. Blank text yields an
    empty list.
    """
    if is_blank(text):
        return []

    rules = rules or DEFAULT_RULES
    suggestions: List[Suggestion] = []

    sentences = split_sentences_with_punctuation(text)
    for number, sentence in enumerate(sentences, 1):
        suggestions.extend(_check_sentence(sentence, number, rules))

    for token in tokenize_words(text):
        finding = _check_token(token, rules)
        if finding:
            suggestions.append(finding)

    logger.debug(f"Style check: {len(sentences)} sentences, {len(suggestions)} suggestions")
    return suggestions


def suggestion_state(text: str, suggestions: List[Suggestion]) -> SuggestionState:
    if is_blank(text):
        return SuggestionState.EMPTY
    if suggestions:
        return SuggestionState.HAS_FINDINGS
    return SuggestionState.CLEAN
