import logging
import math
import re
from collections import Counter
from typing import List, Optional

from app.schemas.analysis_models import AnalysisConfig, Metrics
from app.schemas.common import LetterDensity

logger = logging.getLogger(__name__)

# Compile regex once at module level for performance
WHITESPACE_REGEX = re.compile(r"\s")
WORD_SPLIT_REGEX = re.compile(r"\s+")
SENTENCE_SPLIT_REGEX = re.compile(r"[.!?]+")
NON_LETTER_REGEX = re.compile(r"[^A-Z]")

WORDS_PER_MINUTE = 200
DENSITY_TOP_N = 5

DEFAULT_CONFIG = AnalysisConfig()


class TextAnalyzer:
    """Stateless wrapper around analyze(), handy for dependency injection."""

    def analyze(self, text: str, config: Optional[AnalysisConfig] = None) -> Metrics:
        return analyze(text, config)


def analyze(text: str, config: Optional[AnalysisConfig] = None) -> Metrics:
    """Computes live statistics for a block of text.

    This is a pure function of (text, config). It never raises: invalid
    configuration has already been normalized by AnalysisConfig, and
    non-string input is treated as empty text.

    Args:
        text (str): The raw text exactly as typed by the user.
        config (Optional[AnalysisConfig]): Analysis settings. Defaults to
            counting spaces with no character limit.

    Returns:
        Metrics: Counts, reading time, limit flag and letter density.
    """
    if not isinstance(text, str):
        text = ""
    if config is None:
        config = DEFAULT_CONFIG

    limit_exceeded = _is_limit_exceeded(text, config.character_limit)
    character_count = _count_characters(text, config.exclude_spaces)

    trimmed = text.strip()
    word_count = _count_words(trimmed)
    sentence_count = _count_sentences(text, trimmed)

    metrics = Metrics(
        character_count=character_count,
        word_count=word_count,
        sentence_count=sentence_count,
        reading_time_minutes=_calculate_reading_time(word_count),
        has_words=word_count > 0,
        limit_exceeded=limit_exceeded,
        letter_density=get_letter_density(text),
    )
    logger.debug(
        "Analyzed %d chars: %d words, %d sentences",
        len(text),
        word_count,
        sentence_count,
    )
    return metrics


def _is_limit_exceeded(text: str, character_limit: Optional[int]) -> bool:
    """Checks the raw text length against the soft character limit.

    Always uses the unmodified length, whatever exclude_spaces says.
    """
    if character_limit is None or character_limit <= 0:
        return False
    return len(text) > character_limit


def _count_characters(text: str, exclude_spaces: bool) -> int:
    if exclude_spaces:
        return len(WHITESPACE_REGEX.sub("", text))
    return len(text)


def _count_words(trimmed: str) -> int:
    """Counts whitespace separated tokens in already trimmed text."""
    if not trimmed:
        return 0
    return len(WORD_SPLIT_REGEX.split(trimmed))


def _count_sentences(text: str, trimmed: str) -> int:
    """Counts sentences delimited by runs of '.', '!' or '?'.

    The emptiness check uses the trimmed text but the split runs over the
    original text. Segments that are blank after trimming are ignored, so
    trailing punctuation does not add a sentence.

    Args:
        text (str): The original, untrimmed text.
        trimmed (str): The same text with outer whitespace removed.

    Returns:
        int: Number of non-blank segments.
    """
    if not trimmed:
        return 0
    segments = SENTENCE_SPLIT_REGEX.split(text)
    return sum(1 for s in segments if s.strip())


def _calculate_reading_time(word_count: int) -> int:
    """Minutes to read word_count words at WORDS_PER_MINUTE, rounded up."""
    return math.ceil(word_count / WORDS_PER_MINUTE)


def get_letter_density(text: str, top_n: int = DENSITY_TOP_N) -> List[LetterDensity]:
    """Ranks the most frequent A-Z letters in the text.

    Letters are counted case-insensitively; everything outside A-Z after
    uppercasing is ignored. Ties keep the order in which the letters first
    appear, since sorted() is stable and Counter preserves insertion order.

    Args:
        text (str): The original text.
        top_n (int): How many letters to keep.

    Returns:
        List[LetterDensity]: Up to top_n entries, highest count first. Empty
            if the text contains no A-Z letters.
    """
    clean_text = NON_LETTER_REGEX.sub("", text.upper())
    clean_total = len(clean_text)

    if clean_total == 0:
        return []

    letter_counter = Counter(clean_text)
    ranked = sorted(letter_counter.items(), key=lambda item: item[1], reverse=True)

    return [
        LetterDensity(
            letter=letter,
            count=count,
            percentage=round(count / clean_total * 100, 2),
        )
        for letter, count in ranked[:top_n]
    ]
