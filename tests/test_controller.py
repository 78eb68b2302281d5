import pytest

from glowbounce.controller import AnimationState, ScreensaverController
from glowbounce.motion import TextExtent
from glowbounce.scheduler import FrameScheduler


class FixedRandom:
    """Returns queued values in order, then repeats the last one."""

    def __init__(self, *values):
        self.values = list(values)

    def random(self) -> float:
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


def measure(text: str, font_size: float) -> TextExtent:
    return TextExtent(len(text) * font_size * 0.6, font_size)


def make_controller(width=1920, height=1080, rng=None, emit=None):
    frames = []
    scheduler = FrameScheduler()
    controller = ScreensaverController(
        scheduler, measure, width, height,
        emit=emit or frames.append, rng=rng or FixedRandom(0.5),
    )
    return controller, scheduler, frames


def test_starts_idle() -> None:
    controller, scheduler, _ = make_controller()
    assert controller.state is AnimationState.IDLE
    assert controller.token is None
    assert not scheduler.pending


def test_start_places_text_and_schedules_one_frame() -> None:
    controller, scheduler, frames = make_controller()
    controller.start("ABC")

    assert controller.state is AnimationState.RUNNING
    assert controller.text == "ABC"
    assert controller.token is not None
    assert scheduler.pending
    assert frames == []

    assert controller.scaling.font_size == pytest.approx(172.8)
    assert controller.position.x == pytest.approx(0.5 * (1920 - 172.8 * 8))
    assert controller.position.y == pytest.approx(0.5 * (1080 - 172.8 * 1.2))
    assert controller.velocity.x == pytest.approx(4.8)
    assert controller.velocity.y == pytest.approx(3.6)


def test_start_uses_margin_when_text_estimate_is_wider_than_viewport() -> None:
    controller, _, _ = make_controller(width=400, height=90, rng=FixedRandom(1.0))
    controller.start("X")
    assert controller.position.x == pytest.approx(100)
    assert controller.position.y == pytest.approx(50)


def test_on_frame_emits_and_reschedules() -> None:
    controller, scheduler, frames = make_controller()
    controller.start("ABC")
    first_token = controller.token

    scheduler.run_pending()

    assert len(frames) == 1
    frame = frames[0]
    assert frame.text == "ABC"
    assert frame.font_size == pytest.approx(172.8)
    assert frame.layers[0].blur_radius == pytest.approx(172.8 / 3)
    assert scheduler.pending
    assert controller.token not in (None, first_token)


def test_position_stays_in_bounds_full_hd() -> None:
    controller, scheduler, frames = make_controller()
    controller.start("ABC")
    text_width = 3 * 172.8 * 0.6

    for _ in range(2000):
        scheduler.run_pending()

    assert len(frames) == 2000
    for frame in frames:
        assert 0 <= frame.position.x <= 1920 - text_width
        assert 0 <= frame.position.y <= 1080 - 172.8


def test_bounce_changes_color() -> None:
    controller, scheduler, frames = make_controller(width=200, height=200, rng=FixedRandom(0.99))
    controller.start("ABCDEFG")
    scheduler.run_pending()

    assert controller.color_index == 1
    assert frames[0].layers[0].color == (0, 255, 0)
    assert controller.velocity.x < 0


def test_stop_resets_and_cancels() -> None:
    controller, scheduler, frames = make_controller(width=200, height=200, rng=FixedRandom(0.99))
    controller.start("ABCDEFG")
    scheduler.run_pending()
    assert controller.color_index == 1

    controller.stop()

    assert controller.state is AnimationState.IDLE
    assert controller.text == ""
    assert controller.color_index == 0
    assert controller.token is None
    assert not scheduler.pending


def test_stop_twice_is_harmless() -> None:
    controller, scheduler, _ = make_controller()
    controller.start("ABC")
    controller.stop()
    controller.stop()
    assert controller.state is AnimationState.IDLE
    assert not scheduler.pending


def test_stop_while_idle_is_noop() -> None:
    controller, scheduler, _ = make_controller()
    controller.stop()
    assert controller.state is AnimationState.IDLE


def test_late_frame_after_stop_is_dropped() -> None:
    controller, _, frames = make_controller()
    controller.start("ABC")
    controller.stop()
    controller.on_frame()
    assert frames == []


def test_restart_picks_new_position_and_resets_palette() -> None:
    controller, scheduler, _ = make_controller(width=200, height=200, rng=FixedRandom(0.99, 0.99, 0.25, 0.75))
    controller.start("ABCDEFG")
    scheduler.run_pending()
    controller.stop()

    controller.start("ABCDEFG")

    assert controller.color_index == 0
    assert controller.position.x == pytest.approx(25)
    assert controller.position.y == pytest.approx(0.75 * (200 - 40 * 1.2))
    assert controller.velocity.x > 0 and controller.velocity.y > 0


def test_start_while_running_keeps_one_token() -> None:
    controller, scheduler, frames = make_controller()
    controller.start("ABC")
    controller.start("XYZ")
    assert controller.text == "XYZ"

    scheduler.run_pending()
    assert len(frames) == 1
    assert frames[0].text == "XYZ"
    assert scheduler.run_pending() is True
    assert len(frames) == 2


def test_resize_while_idle_only_stores_viewport() -> None:
    controller, _, _ = make_controller()
    before = controller.scaling
    controller.on_resize(400, 300)
    assert controller.viewport.width == 400
    assert controller.scaling == before

    controller.start("ABC")
    assert controller.scaling.font_size == 40
    assert controller.velocity.x == pytest.approx(1)


def test_resize_while_running_rescales_speed_not_position() -> None:
    controller, scheduler, frames = make_controller()
    controller.start("ABC")
    scheduler.run_pending()
    position = controller.position

    controller.on_resize(800, 600)

    assert controller.position == position
    assert controller.scaling.font_size == pytest.approx(48)
    assert abs(controller.velocity.x) == pytest.approx(2)
    assert abs(controller.velocity.y) == pytest.approx(1.5)

    scheduler.run_pending()
    assert frames[-1].font_size == pytest.approx(48)


def test_emit_that_stops_prevents_reschedule() -> None:
    scheduler = FrameScheduler()
    holder = {}

    def emit(frame) -> None:
        holder["controller"].stop()

    controller = ScreensaverController(scheduler, measure, 1920, 1080, emit=emit, rng=FixedRandom(0.5))
    holder["controller"] = controller
    controller.start("ABC")
    scheduler.run_pending()

    assert controller.state is AnimationState.IDLE
    assert not scheduler.pending


def test_empty_text_does_not_raise() -> None:
    controller, scheduler, frames = make_controller()
    controller.start("")
    scheduler.run_pending()
    assert frames[0].extent.width == 0


def test_failing_emit_still_reschedules() -> None:
    scheduler = FrameScheduler()

    def emit(frame) -> None:
        raise RuntimeError("surface lost")

    controller = ScreensaverController(scheduler, measure, 1000, 1000, emit=emit, rng=FixedRandom(0.5))
    controller.start("A")

    with pytest.raises(RuntimeError):
        scheduler.run_pending()

    assert controller.state is AnimationState.RUNNING
    assert controller.token is not None
    assert scheduler.pending


def test_failing_measure_still_reschedules() -> None:
    scheduler = FrameScheduler()

    def broken_measure(text: str, font_size: float) -> TextExtent:
        raise OSError("font missing")

    frames = []
    controller = ScreensaverController(scheduler, broken_measure, 1000, 1000,
                                       emit=frames.append, rng=FixedRandom(0.5))
    controller.start("A")

    with pytest.raises(OSError):
        scheduler.run_pending()

    assert frames == []
    assert scheduler.pending
    controller.stop()
    assert not scheduler.pending
