from app.schemas.analysis_models import AnalysisConfig
from app.services.analyzer_service import analyze
from app.services.display_service import (
    EMPTY_DENSITY_MESSAGE,
    CounterAnimator,
    build_display,
    format_density_rows,
    format_reading_time,
    interpolate,
)

# --- Formatting Tests ---


def test_reading_time_label():
    """Test the "0" versus "<N" reading time convention."""
    assert format_reading_time(analyze("")) == "0"
    assert format_reading_time(analyze("   ")) == "0"
    assert format_reading_time(analyze("Hello world")) == "<1"
    assert format_reading_time(analyze(" ".join(["w"] * 401))) == "<3"


def test_density_rows_use_two_decimals():
    rows = format_density_rows(analyze("aaaa bbbb"))
    assert [r.letter for r in rows] == ["A", "B"]
    assert rows[0].percentage == "50.00"
    assert rows[0].label == "4 (50.00%)"
    assert rows[0].bar_width == "50.00%"


def test_build_display_empty_state():
    """Test that text without letters shows the empty-state message."""
    display = build_display(analyze("1234 ..."))
    assert display.density_rows == []
    assert display.empty_density_message == EMPTY_DENSITY_MESSAGE
    assert display.limit_warning is False


def test_build_display_with_limit_warning():
    display = build_display(analyze("too long", AnalysisConfig(character_limit=3)))
    assert display.limit_warning is True
    assert display.empty_density_message is None
    assert display.reading_time == "<1"


# --- Animation Tests ---


def test_interpolate_progress():
    """Test floored linear interpolation towards the target."""
    assert interpolate(0, 100, 0, 500) == 0
    assert interpolate(0, 100, 250, 500) == 50
    assert interpolate(0, 3, 100, 500) == 0
    assert interpolate(10, 0, 250, 500) == 5
    assert interpolate(0, 100, 500, 500) == 100
    assert interpolate(0, 100, 9000, 500) == 100


def test_interpolate_degenerate_timing():
    assert interpolate(0, 100, -50, 500) == 0
    assert interpolate(0, 100, 10, 0) == 100


def test_animator_plans_changed_fields():
    """Test that update() plans animations only for changed counters."""
    animator = CounterAnimator()
    plans = animator.update(analyze("Hello world"))

    by_field = {p.field: p for p in plans}
    assert set(by_field) == {"characters", "words", "sentences"}
    assert (by_field["characters"].start, by_field["characters"].end) == (0, 11)
    assert by_field["words"].duration_ms == 500

    # Same metrics again: nothing new to animate
    assert animator.update(analyze("Hello world")) == []


def test_animator_frames_and_supersede():
    """Test that a newer update cancels the in-flight animation."""
    animator = CounterAnimator()
    first = {p.field: p for p in animator.update(analyze("Hello world"))}
    gen = first["characters"].generation

    assert animator.frame("characters", 250, gen) == 5
    assert animator.displayed("characters") == 5

    second = {p.field: p for p in animator.update(analyze("x" * 20))}
    plan = second["characters"]
    assert plan.start == 5
    assert plan.end == 20
    assert plan.generation > gen

    # Frames from the superseded animation are dropped
    assert animator.frame("characters", 500, gen) is None
    assert animator.displayed("characters") == 5

    assert animator.frame("characters", 500, plan.generation) == 20
    assert animator.displayed("characters") == 20


def test_animator_cancel_when_target_equals_display():
    """Test that returning to the displayed value stops the animation."""
    animator = CounterAnimator()
    first = {p.field: p for p in animator.update(analyze("x" * 10))}
    gen = first["characters"].generation
    assert animator.frame("characters", 250, gen) == 5

    plans = animator.update(analyze("x" * 5))
    assert "characters" not in {p.field for p in plans}
    assert animator.frame("characters", 400, gen) is None
    assert animator.displayed("characters") == 5


def test_animators_do_not_share_state():
    a = CounterAnimator()
    b = CounterAnimator()
    a.update(analyze("Hello"))
    assert b.update(analyze("Hello")) != []
    assert b.displayed("words") == 0
