"""
Pydantic schemas for the text analysis contract.
"""

import math
import re
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import LetterDensity

# Mirrors parseInt(value, 10): optional sign followed by leading digits
LEADING_INT_REGEX = re.compile(r"^\s*([+-]?)(\d+)")

# A limit this long can never be exceeded by any text held in memory
MAX_LIMIT_DIGITS = 18

TRUE_STRINGS = {"true", "1", "yes", "on"}


def parse_character_limit(value: Any) -> Optional[int]:
    """Normalizes a user supplied character limit.

    Anything that does not resolve to a positive integer means "no limit".
    Limits with more than MAX_LIMIT_DIGITS significant digits also mean no
    limit, since no text can be longer.

    Args:
        value (Any): Raw limit value from the UI or request body.

    Returns:
        Optional[int]: The positive limit, or None if no limit applies.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        limit = value
    elif isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        limit = int(value)
    elif isinstance(value, str):
        match = LEADING_INT_REGEX.match(value)
        if not match:
            return None
        sign, digits = match.groups()
        digits = digits.lstrip("0")
        if sign == "-" or not digits or len(digits) > MAX_LIMIT_DIGITS:
            return None
        limit = int(digits)
    else:
        return None

    return limit if limit > 0 else None


def parse_exclude_spaces(value: Any) -> bool:
    """Normalizes the exclude-spaces flag, falling back to False.

    Args:
        value (Any): Raw flag from the UI, request body or command line.

    Returns:
        bool: True only for true-like values ("true", "on", 1, ...).
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value == 1
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return False


class AnalysisConfig(BaseModel):
    """Settings applied to a single analysis call.

    Attributes:
        exclude_spaces (bool): Drop whitespace from the character count.
        character_limit (Optional[int]): Soft cap on raw text length.
    """

    model_config = ConfigDict(frozen=True)

    exclude_spaces: bool = False
    character_limit: Optional[int] = None

    @field_validator("exclude_spaces", mode="before")
    @classmethod
    def normalize_exclude_spaces(cls, v: Any) -> bool:
        return parse_exclude_spaces(v)

    @field_validator("character_limit", mode="before")
    @classmethod
    def normalize_limit(cls, v: Any) -> Optional[int]:
        return parse_character_limit(v)


class Metrics(BaseModel):
    """Result of analyzing a block of text.

    Recomputed on every call; two calls with the same input compare equal.
    """

    model_config = ConfigDict(frozen=True)

    # Counts
    character_count: int = 0
    word_count: int = 0
    sentence_count: int = 0

    # Reading time (ceil at 200 wpm)
    reading_time_minutes: int = 0
    has_words: bool = False

    # Soft limit
    limit_exceeded: bool = False

    # Top letters, highest count first
    letter_density: List[LetterDensity] = Field(default_factory=list)


class AnalysisRequest(BaseModel):
    """Request model for text analysis."""

    text: str = ""
    exclude_spaces: Any = False
    character_limit: Any = None

    def to_config(self) -> AnalysisConfig:
        return AnalysisConfig(
            exclude_spaces=self.exclude_spaces, character_limit=self.character_limit
        )
