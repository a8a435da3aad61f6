"""
Presentation helpers that turn Metrics into ready-to-render values.

Nothing here feeds back into the analyzer. Animation state is owned by
CounterAnimator instances, one per client view.
"""

import math
from typing import Dict, List, Optional

from pydantic import BaseModel

from app.schemas.analysis_models import Metrics
from app.schemas.common import DensityRow, DisplayPayload

EMPTY_DENSITY_MESSAGE = "No characters found. Start typing to see letter density."
ANIMATION_DURATION_MS = 500

# Display field -> Metrics attribute
COUNTER_FIELDS: Dict[str, str] = {
    "characters": "character_count",
    "words": "word_count",
    "sentences": "sentence_count",
}


def format_reading_time(metrics: Metrics) -> str:
    """Formats the reading time label.

    Returns "0" for text without words, otherwise "<N" because the
    ceiling is an upper bound.
    """
    if not metrics.has_words:
        return "0"
    return f"<{metrics.reading_time_minutes}"


def format_density_rows(metrics: Metrics) -> List[DensityRow]:
    rows = []
    for entry in metrics.letter_density:
        percentage = f"{entry.percentage:.2f}"
        rows.append(
            DensityRow(
                letter=entry.letter,
                count=entry.count,
                percentage=percentage,
                label=f"{entry.count} ({percentage}%)",
                bar_width=f"{percentage}%",
            )
        )
    return rows


def build_display(metrics: Metrics) -> DisplayPayload:
    """Builds everything the UI needs to render one analysis result.

    Args:
        metrics (Metrics): Output of the analyzer.

    Returns:
        DisplayPayload: Reading time label, limit warning flag, density rows
            and the empty-state message when there are no letters.
    """
    rows = format_density_rows(metrics)
    return DisplayPayload(
        reading_time=format_reading_time(metrics),
        limit_warning=metrics.limit_exceeded,
        density_rows=rows,
        empty_density_message=None if rows else EMPTY_DENSITY_MESSAGE,
    )


def interpolate(start: int, end: int, elapsed_ms: float, duration_ms: float) -> int:
    """Value of an animated counter after elapsed_ms.

    Args:
        start (int): Value displayed when the animation began.
        end (int): Target value.
        elapsed_ms (float): Time since the first frame.
        duration_ms (float): Total animation length.

    Returns:
        int: The floored intermediate value, or end once finished.
    """
    if duration_ms <= 0:
        return end

    progress = min(max(elapsed_ms, 0) / duration_ms, 1)
    if progress >= 1:
        return end
    return math.floor(progress * (end - start) + start)


class AnimationPlan(BaseModel):
    """An animation started by CounterAnimator.update()."""

    field: str
    start: int
    end: int
    duration_ms: int
    generation: int


class CounterAnimator:
    """Tracks displayed counter values and in-flight animations.

    Each update() supersedes any running animation for the same field;
    frames requested for a superseded generation return None so the
    caller can drop them.
    """

    def __init__(self, duration_ms: int = ANIMATION_DURATION_MS):
        self.duration_ms = duration_ms
        self._displayed = {field: 0 for field in COUNTER_FIELDS}
        self._targets = {field: 0 for field in COUNTER_FIELDS}
        self._starts = {field: 0 for field in COUNTER_FIELDS}
        self._generations = {field: 0 for field in COUNTER_FIELDS}

    def displayed(self, field: str) -> int:
        return self._displayed[field]

    def generation(self, field: str) -> int:
        return self._generations[field]

    def update(self, metrics: Metrics) -> List[AnimationPlan]:
        """Starts animations towards the counts in metrics.

        Args:
            metrics (Metrics): The latest analysis result.

        Returns:
            List[AnimationPlan]: One plan per field whose target changed
                and differs from the value currently displayed.
        """
        plans = []
        for field, attr in COUNTER_FIELDS.items():
            target = getattr(metrics, attr)
            current = self._displayed[field]

            # Already showing or heading towards this value
            if target == self._targets[field]:
                continue

            # Any new target cancels the animation in flight
            self._generations[field] += 1
            self._starts[field] = current
            self._targets[field] = target

            if current == target:
                continue

            plans.append(
                AnimationPlan(
                    field=field,
                    start=current,
                    end=target,
                    duration_ms=self.duration_ms,
                    generation=self._generations[field],
                )
            )
        return plans

    def frame(self, field: str, elapsed_ms: float, generation: int) -> Optional[int]:
        """Advances an animation and returns the value to display.

        Args:
            field (str): One of COUNTER_FIELDS.
            elapsed_ms (float): Time since the animation started.
            generation (int): Generation from the AnimationPlan.

        Returns:
            Optional[int]: The value to show, or None if superseded.
        """
        if generation != self._generations[field]:
            return None

        value = interpolate(
            self._starts[field], self._targets[field], elapsed_ms, self.duration_ms
        )
        self._displayed[field] = value
        return value
