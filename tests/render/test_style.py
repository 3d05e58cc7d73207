from __future__ import annotations

import hypothesis.strategies as st
from hypothesis import given, settings

from shapekit.render.style import CONTEXT_FIELDS, StyleOptions

CANVAS_KEYS = {
    "lineWidth": "line_width",
    "strokeStyle": "stroke_style",
    "fillStyle": "fill_style",
    "lineCap": "line_cap",
    "font": "font",
    "textBaseline": "text_baseline",
    "textAlign": "text_align",
}

values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-5, max_value=50),
    st.text(max_size=12),
)


@settings(deadline=None, max_examples=60)
@given(key=st.sampled_from(sorted(CANVAS_KEYS)), value=values)
def test_single_key_mutates_exactly_one_field(
    make_fake_context, key: str, value: object
) -> None:
    ctx = make_fake_context()
    StyleOptions.from_props({key: value}).apply(ctx)
    assert ctx.sets() == [(CANVAS_KEYS[key], value)]


@settings(deadline=None, max_examples=40)
@given(
    key=st.text(min_size=1, max_size=16).filter(
        lambda k: k not in CANVAS_KEYS and k not in CONTEXT_FIELDS
    ),
    value=values,
)
def test_unknown_keys_never_mutate(
    make_fake_context, key: str, value: object
) -> None:
    ctx = make_fake_context()
    StyleOptions.from_props({key: value}).apply(ctx)
    assert ctx.sets() == []


def test_snake_case_names_accepted() -> None:
    opts = StyleOptions(line_width=2, fill_style="red")
    assert opts.present == ["line_width", "fill_style"]
    assert opts.has_fill


def test_from_props_passthrough_and_none() -> None:
    opts = StyleOptions.from_props({"font": "12px serif"})
    assert StyleOptions.from_props(opts) is opts
    assert StyleOptions.from_props(None).present == []


def test_presence_not_truthiness() -> None:
    assert StyleOptions.from_props({"fillStyle": None}).has_fill
    assert StyleOptions.from_props({"fillStyle": 0}).has_fill
    assert not StyleOptions.from_props({"strokeStyle": "red"}).has_fill


def test_values_not_coerced() -> None:
    gradient = object()
    opts = StyleOptions.from_props({"fillStyle": gradient, "lineWidth": "3"})
    assert opts.fill_style is gradient
    assert opts.line_width == "3"
