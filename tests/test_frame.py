import pytest

from glowbounce.frame import RenderFrameProducer
from glowbounce.motion import MotionSimulator, TextExtent


def test_three_layers_same_color_decreasing_blur() -> None:
    motion = MotionSimulator(12.5, 30)
    frame = RenderFrameProducer().build(motion, TextExtent(300, 120), (255, 0, 255), 120, text="ACME")

    assert frame.text == "ACME"
    assert (frame.position.x, frame.position.y) == (12.5, 30)
    assert frame.extent == TextExtent(300, 120)
    assert frame.background == (0, 0, 0)
    assert [layer.blur_radius for layer in frame.layers] == pytest.approx([40, 20, 0])
    assert {layer.color for layer in frame.layers} == {(255, 0, 255)}


def test_frame_is_a_snapshot() -> None:
    motion = MotionSimulator(0, 0)
    frame = RenderFrameProducer().build(motion, TextExtent(10, 10), (1, 1, 1), 40)
    motion.reset(99, 99)
    assert frame.position.x == 0
