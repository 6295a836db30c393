from cords.anim.progress import ProgressIndicator
from cords.ui.draw import DrawContext
from cords.ui.layout import Rect
from cords.ui.style import HIGHLIGHT_ALPHA, IDLE_ALPHA


def test_cycles_through_five_steps():
    indicator = ProgressIndicator(400, 5)
    steps = []
    for _ in range(7):
        indicator.advance(0.4)
        steps.append(indicator.step)
    assert steps == [1, 2, 3, 4, 0, 1, 2]


def test_cancel_freezes_step():
    indicator = ProgressIndicator(400, 5)
    indicator.advance(0.4)
    indicator.cancel()
    indicator.advance(10.0)
    assert indicator.step == 1
    assert indicator.active == False


def test_draw_highlights_current_group():
    indicator = ProgressIndicator(400, 5)
    ctx = DrawContext(420, 860)
    indicator.draw(ctx, Rect(85, 800, 250, 30))

    lines = ctx.batch.lines
    assert len(lines) == 9
    # Centre mark is lit at step 0
    centre = [l for l in lines if l.x0 == 210.0]
    assert len(centre) == 1
    assert centre[0].color[3] == HIGHLIGHT_ALPHA
    assert sum(1 for l in lines if l.color[3] == IDLE_ALPHA) == 8


def test_draw_outer_marks_at_last_step():
    indicator = ProgressIndicator(400, 5)
    for _ in range(4):
        indicator.advance(0.4)
    ctx = DrawContext(420, 860)
    indicator.draw(ctx, Rect(85, 800, 250, 30))
    lit = [l for l in ctx.batch.lines if l.color[3] == HIGHLIGHT_ALPHA]
    assert sorted(l.x0 for l in lit) == [95.0, 325.0]
