"""Streamlit viewer for storygraph timelines."""

from __future__ import annotations

import importlib
import importlib.util
import sys


if __package__ in {None, ""}:  # pragma: no cover - defensive import guard
    # Allow ``python -m streamlit run storygraph/app.py`` without installation by
    # deriving the package context from the file location.
    from pathlib import Path

    module = sys.modules[__name__]
    package_dir = Path(__file__).resolve().parent
    package_name = package_dir.name

    sys_path_entry = str(package_dir.parent)
    if sys_path_entry not in sys.path:
        sys.path.insert(0, sys_path_entry)

    module.__package__ = package_name

    canonical_name = f"{package_name}.app"
    spec = importlib.util.spec_from_file_location(canonical_name, __file__)
    if spec is not None:
        module.__spec__ = spec
        if spec.loader is not None:
            module.__loader__ = spec.loader

    sys.modules.setdefault(canonical_name, module)
    importlib.import_module(package_name)

import streamlit as st

from storygraph.figure import build_figure
from storygraph.samples import jurassic_park
from storygraph.settings import DEFAULT_SETTINGS, LayoutSettings
from storygraph.timeline import TimelineDriver


def _settings_panel() -> LayoutSettings:
    st.sidebar.markdown("## Layout")
    curve_span = st.sidebar.slider(
        "Curve span", min_value=20, max_value=200, value=int(DEFAULT_SETTINGS.curve_span), step=5
    )
    straight_span = st.sidebar.slider(
        "Straight span", min_value=10, max_value=200, value=int(DEFAULT_SETTINGS.straight_span), step=5
    )
    in_group_gap = st.sidebar.slider(
        "Gap within a group", min_value=2, max_value=40, value=int(DEFAULT_SETTINGS.in_group_gap), step=1
    )
    inter_group_gap = st.sidebar.slider(
        "Gap between groups", min_value=10, max_value=120, value=int(DEFAULT_SETTINGS.inter_group_gap), step=5
    )
    return DEFAULT_SETTINGS.with_overrides(
        curve_span=float(curve_span),
        straight_span=float(straight_span),
        in_group_gap=float(in_group_gap),
        inter_group_gap=float(inter_group_gap),
    )


def main() -> None:
    st.set_page_config(page_title="Storygraph", layout="wide")

    story = jurassic_park()
    settings = _settings_panel()
    result = TimelineDriver(settings).render(story)

    st.title(story.title)
    beats_col, cast_col, shapes_col = st.columns(3)
    beats_col.metric("Beats", len(story.beats))
    cast_col.metric("Cast", len(result.track_state))
    shapes_col.metric("Primitives", len(result.primitives))

    st.plotly_chart(build_figure(result, settings=settings), use_container_width=True)

    with st.expander("Final positions"):
        st.dataframe(result.track_state.to_dataframe(), use_container_width=True)
    with st.expander("Primitives"):
        st.dataframe(result.to_dataframe(), use_container_width=True)


if __name__ == "__main__":  # pragma: no cover
    main()
