"""Frequency and position based extractive summarization."""

import re
from collections import Counter

from newsbrief.models.results import Sentence

DEFAULT_MAX_SENTENCES = 5
MIN_SENTENCE_LENGTH = 15

SENTENCE_SPLIT = re.compile(r'[.!?。！？]+')
TOKEN_PATTERN = re.compile(r'[가-힣a-z0-9]+')
NUMERIC_ONLY = re.compile(r'[\d\s,:%+\-/]+')
COPYRIGHT_MARKS = ('©', 'ⓒ')

# Korean particles, conjunctions and reporting verbs that carry no topic
STOP_WORDS: frozenset[str] = frozenset(
    {
        '그리고',
        '그러나',
        '하지만',
        '그런데',
        '그래서',
        '따라서',
        '또한',
        '또는',
        '및',
        '등',
        '이',
        '그',
        '저',
        '것',
        '수',
        '더',
        '이번',
        '지난',
        '통해',
        '위해',
        '대한',
        '대해',
        '관련',
        '있다',
        '있는',
        '없다',
        '했다',
        '한다',
        '하는',
        '하고',
        '이다',
        '밝혔다',
        '말했다',
        '전했다',
        '기자',
    }
)

POSITION_WEIGHT = 0.3
IDEAL_LENGTH_RANGE = (30, 200)
OUTLIER_LENGTH_FACTOR = 0.7


def split_sentences(content: str) -> list[str]:
    """Split text on runs of sentence-terminal punctuation and drop noise.

    Sentences that are too short, purely numeric or carry a copyright
    mark (bylines, agency footers) are dropped.
    """
    sentences = []
    for raw in SENTENCE_SPLIT.split(content or ''):
        text = raw.strip()
        if len(text) <= MIN_SENTENCE_LENGTH:
            continue
        if NUMERIC_ONLY.fullmatch(text):
            continue
        if any(mark in text for mark in COPYRIGHT_MARKS):
            continue
        sentences.append(text)
    return sentences


def tokenize(text: str) -> list[str]:
    """Hangul, Latin and digit runs, with Latin case-folded."""
    return TOKEN_PATTERN.findall(text.lower())


def build_word_frequencies(content: str) -> Counter[str]:
    """Count keyword occurrences, ignoring stop words and single characters."""
    return Counter(token for token in tokenize(content) if len(token) > 1 and token not in STOP_WORDS)


def score_sentence(sentence: Sentence, total: int, frequencies: Counter[str]) -> float:
    """Score a sentence as keyword density x position decay x length factor.

    Keyword density is the average frequency per token so long sentences are
    not favored just for being long.
    """
    tokens = tokenize(sentence.text)
    keyword_score = sum(frequencies[token] for token in tokens) / len(tokens) if tokens else 0.0
    position_score = 1 - (sentence.original_index / total) * POSITION_WEIGHT

    low, high = IDEAL_LENGTH_RANGE
    length_score = 1.0 if low < len(sentence.text) < high else OUTLIER_LENGTH_FACTOR

    return keyword_score * position_score * length_score


def _join(sentences: list[str]) -> str:
    if not sentences:
        return ''
    return '. '.join(sentences) + '.'


def extractive_summary(content: str, max_sentences: int = DEFAULT_MAX_SENTENCES) -> str:
    """Summarize ``content`` by selecting its highest scoring sentences.

    Args:
        content: Article body text
        max_sentences: Maximum number of sentences in the summary

    Returns:
        Selected sentences in their original order, joined with '. ' and
        ending with a period. Empty when no sentence qualifies.

    Raises:
        ValueError: If ``max_sentences`` is smaller than 1

    """
    if max_sentences < 1:
        raise ValueError(f'max_sentences must be at least 1, got {max_sentences}')

    texts = split_sentences(content)
    if len(texts) <= max_sentences:
        return _join(texts)

    frequencies = build_word_frequencies(content)
    total = len(texts)
    sentences = [Sentence(text=text, original_index=index) for index, text in enumerate(texts)]
    for sentence in sentences:
        sentence.score = score_sentence(sentence, total, frequencies)

    # sorted() is stable, so equal scores keep their original order
    ranked = sorted(sentences, key=lambda s: s.score, reverse=True)[:max_sentences]
    ranked.sort(key=lambda s: s.original_index)

    return _join([s.text for s in ranked])
