"""Streamlit UI for generating or uploading points and viewing their convex hull."""
from __future__ import annotations

import tempfile
from pathlib import Path
from typing import List, Sequence

import pandas as pd
import streamlit as st

from analysis import hull_summary
from io_points_csv import load_points_csv
from models import LineSegment, Point, RunConfig
from point_source import generate_points, sort_points_by_x
from quickhull import compute_convex_hull
from rscript import render_rscript
from validation import HullInputError


def _load_points_from_upload(data: bytes) -> List[Point]:
    """Persist the uploaded bytes then load them via :func:`load_points_csv`."""

    tmp = tempfile.NamedTemporaryFile("wb", delete=False, suffix=".csv")
    with tmp as handle:
        handle.write(data)
    try:
        return load_points_csv(tmp.name)
    finally:
        Path(tmp.name).unlink(missing_ok=True)


def _points_frame(points: Sequence[Point]) -> pd.DataFrame:
    return pd.DataFrame([{"x": p.x, "y": p.y} for p in points], columns=["x", "y"])


def _segments_frame(segments: Sequence[LineSegment]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"x1": s.start.x, "y1": s.start.y, "x2": s.end.x, "y2": s.end.y}
            for s in segments
        ],
        columns=["x1", "y1", "x2", "y2"],
    )


def _hull_vertex_flags(points: Sequence[Point], segments: Sequence[LineSegment]) -> pd.DataFrame:
    on_hull = {pt for s in segments for pt in (s.start, s.end)}
    frame = _points_frame(points)
    frame["kind"] = ["hull" if p in on_hull else "interior" for p in points]
    return frame


def _configure_run(cfg: RunConfig) -> RunConfig:
    st.subheader("Point generation")
    cfg.num_points = int(
        st.number_input("Number of points", value=cfg.num_points, min_value=1, step=10)
    )
    cfg.plot_range = int(
        st.number_input("Coordinate range", value=cfg.plot_range, min_value=1, step=100)
    )
    use_seed = st.checkbox("Fixed seed", value=cfg.seed is not None)
    if use_seed:
        cfg.seed = int(st.number_input("Seed", value=cfg.seed or 0, step=1))
    else:
        cfg.seed = None
    cfg.png_filename = st.text_input("PNG filename for the R script", value=cfg.png_filename)
    return cfg


def main() -> None:
    st.title("Quickhull viewer")

    cfg = _configure_run(RunConfig())

    uploaded = st.file_uploader("Or upload a point CSV (x,y)", type=["csv"])
    if uploaded:
        try:
            points = _load_points_from_upload(uploaded.getvalue())
        except ValueError as exc:
            st.error(f"Failed to load CSV: {exc}")
            return
        if not points:
            st.warning("Uploaded CSV is empty.")
            return
    else:
        points = generate_points(cfg.num_points, cfg.plot_range, cfg.seed)

    points = sort_points_by_x(points)
    try:
        segments = compute_convex_hull(points, len(points))
    except HullInputError as exc:
        st.error(f"Hull computation failed:\n{exc}")
        return

    summary = hull_summary(points, segments)
    col_pts, col_segs, col_area = st.columns(3)
    col_pts.metric("Points", summary["points"])
    col_segs.metric("Segments", summary["segments"])
    col_area.metric("Area", f"{summary['area']:.1f}")
    if not summary["closed"] and segments:
        st.warning("Hull segments do not form a closed polygon.")

    st.scatter_chart(_hull_vertex_flags(points, segments), x="x", y="y", color="kind")

    with st.expander("Segments", expanded=False):
        st.dataframe(_segments_frame(segments), width="stretch")

    script = render_rscript(
        points, segments, png_filename=cfg.png_filename, plot_range=cfg.plot_range
    )
    col_script, col_csv = st.columns(2)
    with col_script:
        st.download_button("Download R script", script, file_name="convex.R", mime="text/plain")
    with col_csv:
        st.download_button(
            "Download points CSV",
            _points_frame(points).to_csv(index=False),
            file_name="points.csv",
            mime="text/csv",
        )


if __name__ == "__main__":
    main()
