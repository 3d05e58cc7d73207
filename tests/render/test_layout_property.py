from __future__ import annotations

import hypothesis.strategies as st
from hypothesis import given, settings

from shapekit.render.shape import Shape

coord = st.integers(min_value=-500, max_value=500)
radius_strat = st.integers(min_value=1, max_value=60)
item_strat = st.sampled_from(["1", "2", "3", "?", "", "42"])


@settings(deadline=None, max_examples=80)
@given(
    seq=st.lists(item_strat, max_size=12),
    x=coord,
    y=coord,
    radius=radius_strat,
)
def test_sequence_spacing_and_return(
    make_fake_context, seq: list[str], x: int, y: int, radius: int
) -> None:
    ctx = make_fake_context()
    end = Shape(ctx).sequence_of_circles(seq, x, y, radius, "blue")
    arcs = ctx.ops("arc")
    assert len(arcs) == len(seq)
    assert [a[1][0] for a in arcs] == [x + 3 * radius * i for i in range(len(seq))]
    assert all(a[1][1] == y for a in arcs)
    assert end == x + 3 * radius * len(seq)
    for item, text in zip(seq, ctx.ops("fill_text")):
        expected = "red" if item == "?" else "blue"
        assert text[2]["fill_style"] == expected


@settings(deadline=None, max_examples=60)
@given(
    rows=st.lists(st.lists(item_strat, max_size=5), max_size=6),
    x=coord,
    y=coord,
    radius=radius_strat,
)
def test_pyramid_row_origins(
    make_fake_context, rows: list[list[str]], x: int, y: int, radius: int
) -> None:
    ctx = make_fake_context()
    nxt = Shape(ctx).pyramid_of_circles(rows, x, y, radius, "blue")
    expected = []
    for r, row in enumerate(rows):
        row_x = x + r * radius * 1.5
        row_y = y + r * radius * 2
        expected += [(row_x + 3 * radius * i, row_y) for i in range(len(row))]
    got = [a[1][:2] for a in ctx.ops("arc")]
    assert len(got) == len(expected)
    for (gx, gy), (ex, ey) in zip(got, expected):
        assert abs(gx - ex) < 1e-9 and abs(gy - ey) < 1e-9
    assert abs(nxt[0] - (x + len(rows) * radius * 1.5)) < 1e-9
    assert nxt[1] == y + len(rows) * radius * 2


@settings(deadline=None, max_examples=40)
@given(rows=st.lists(st.lists(item_strat, max_size=4), max_size=4))
def test_every_draw_closes_its_path(make_fake_context, rows: list[list[str]]) -> None:
    ctx = make_fake_context()
    Shape(ctx).pyramid_of_circles(rows, 0, 0, 5, "blue")
    names = ctx.names()
    assert names.count("begin_path") == names.count("close_path")
    if names:
        assert names[-1] == "close_path"
