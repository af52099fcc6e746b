"""Word, sentence and syllable tokenization for text analysis.

There are two sentence splitters with different contracts:

* ``split_sentences`` drops terminal punctuation and is used for counting.
* ``split_sentences_with_punctuation`` keeps each sentence's terminal
  punctuation attached, so style checks can inspect the last character.

Whitespace is the set the editor's ``\\s`` recognizes: ASCII space and
controls, no-break space, the Unicode space separators, line/paragraph
separators and the byte order mark. Python's own notion differs (it also
counts ``\\x1c``-``\\x1f`` and ``\\x85`` and skips ``\\ufeff``), so neither
``str.split()`` nor ``re`` ``\\s`` is used here.
"""

import re
from typing import List


WHITESPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
WHITESPACE_RUN = re.compile(f"[{WHITESPACE}]+")
EDGE_WHITESPACE = re.compile(f"\\A[{WHITESPACE}]+|[{WHITESPACE}]+\\Z")

SENTENCE_TERMINATORS = re.compile(r'[.!?]+')
SENTENCE_TERMINATORS_CAPTURED = re.compile(r'([.!?]+)')
TERMINATOR_CHARACTER = re.compile(r'[.!?]')
VOWEL_RUN = re.compile(r'[aeiouy]+')


def trim(text: str) -> str:
    """Remove leading and trailing whitespace."""
    return EDGE_WHITESPACE.sub('', text)


def is_blank(text: str) -> bool:
    return not trim(text)


def tokenize_words(text: str) -> List[str]:
    """Split text on runs of whitespace, dropping empty tokens."""
    return [token for token in WHITESPACE_RUN.split(text) if token]


def split_sentences(text: str) -> List[str]:
    """Split text on runs of ``.``, ``!`` and ``?``; blank fragments are dropped."""
    fragments = (trim(fragment) for fragment in SENTENCE_TERMINATORS.split(text))
    return [fragment for fragment in fragments if fragment]


def count_sentences(text: str) -> int:
    """Number of sentences, floored at 1 so the grade formula never divides by zero."""
    return len(split_sentences(text)) or 1


def split_sentences_with_punctuation(text: str) -> List[str]:
    """Split text into logical sentences that keep their terminal punctuation.

    A run of terminators is appended to the sentence accumulated before it.
    Other fragments are trimmed and start a new sentence; whitespace-only
    fragments are dropped. A sentence with no terminator is kept as is.
    """
    sentences: List[str] = []

    for fragment in SENTENCE_TERMINATORS_CAPTURED.split(text):
        if TERMINATOR_CHARACTER.search(fragment) and sentences:
            sentences[-1] += fragment
        elif not is_blank(fragment):
            sentences.append(trim(fragment))

    return sentences


def count_syllables(word: str) -> int:
    """Count vowel groups (``y`` included) as syllables, never returning less than 1."""
    return len(VOWEL_RUN.findall(word.lower())) or 1
