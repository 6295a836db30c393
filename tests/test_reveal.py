from cords.anim.reveal import TextReveal, RevealLayer


def test_starts_empty():
    reveal = TextReveal("CORDS")
    assert reveal.visible_len1 == 0
    assert reveal.visible_len2 == 0
    assert reveal.layers == [RevealLayer("", 0.2)]


def test_bright_layer_waits_while_negative():
    reveal = TextReveal("CORDS")
    reveal.advance(0.0625)   # progress2 = -5
    assert reveal.progress2.value < 0
    assert reveal.visible_len2 == 0
    assert len(reveal.layers) == 1


def test_reveal_steps():
    reveal = TextReveal("CORDS")
    seen = []
    for _ in range(4):
        reveal.advance(0.125)
        seen.append((reveal.visible_len1, reveal.visible_len2))

    assert seen == [(1, 0), (3, 2), (4, 3), (5, 5)]
    assert reveal.finished


def test_layers_once_both_running():
    reveal = TextReveal("CORDS")
    reveal.advance(0.25)
    assert reveal.layers == [RevealLayer("COR", 0.2), RevealLayer("CO", 0.85)]


def test_dim_layer_is_monotonic_and_completes():
    text = "COMPOSE RELEASE AND DISTRIBUTION SYSTEM"
    reveal = TextReveal(text)
    last = 0
    for _ in range(40):
        reveal.advance(0.016)
        assert reveal.visible_len1 >= last
        last = reveal.visible_len1
    assert reveal.progress1.value == 100.0
    assert reveal.visible_len1 == len(text)


def test_draw_issues_one_text_per_layer():
    from cords.ui.draw import DrawContext

    reveal = TextReveal("CORDS")
    reveal.advance(1.0)
    ctx = DrawContext(400, 800)
    reveal.draw(ctx, 10, 20, font_size=60)
    texts = ctx.batch.texts
    assert [t.text for t in texts] == ["CORDS", "CORDS"]
    assert [t.alpha for t in texts] == [0.2, 0.85]
    assert texts[1].z_index > texts[0].z_index
