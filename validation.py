"""Input validation for the hull entry point and run configuration overrides."""

from __future__ import annotations

from typing import Dict, List, Sequence

from models import Point, RunConfig


class HullInputError(ValueError):
    """Raised when the hull computation is given unusable input."""


def _as_point(item, index: int) -> Point:
    if isinstance(item, Point):
        return item
    try:
        x, y = item
    except (TypeError, ValueError) as exc:
        raise HullInputError(f"Item {index} is not a 2D point: {item!r}") from exc
    if isinstance(x, bool) or isinstance(y, bool) or not isinstance(x, int) or not isinstance(y, int):
        raise HullInputError(f"Item {index} must have integer coordinates, got {item!r}")
    return Point(x, y)


def validate_hull_input(points: Sequence, count: int) -> List[Point]:
    """Check ``points``/``count`` and return the first ``count`` points.

    Raises
    ------
    HullInputError
        If ``count`` is not positive, if fewer than ``count`` points were
        supplied, if an item is not an integer 2D point, or if the points are
        not sorted ascending by (x, y).
    """

    if isinstance(count, bool) or not isinstance(count, int):
        raise HullInputError(f"Point count must be an integer, got {count!r}.")
    if count <= 0:
        raise HullInputError(f"Point count must be positive, got {count}.")
    if len(points) < count:
        raise HullInputError(
            f"Expected at least {count} points, got {len(points)}."
        )

    resolved = [_as_point(points[i], i) for i in range(count)]
    for i in range(1, count):
        # (x, y) order makes points[0] and points[-1] the extreme anchors
        if resolved[i] < resolved[i - 1]:
            raise HullInputError(
                f"Points must be sorted by (x, y); item {i} {resolved[i].as_tuple()} "
                f"follows {resolved[i - 1].as_tuple()}."
            )
    return resolved


def _append_error(errors: List[str], message: str) -> None:
    if message:
        errors.append(message)


def apply_overrides_to_config(overrides: Dict[str, str], cfg: RunConfig) -> RunConfig:
    """Apply ``key=value`` overrides to a :class:`RunConfig`.

    Keys are case-insensitive. All problems are collected and raised together
    as a single ``ValueError``.
    """

    errors: List[str] = []
    lowered = {k.strip().lower(): v.strip() for k, v in overrides.items()}

    for key, value in lowered.items():
        if key == "seed":
            try:
                cfg.seed = int(value)
            except ValueError:
                _append_error(errors, f"Invalid integer for 'seed': {value!r}")
        elif key == "range":
            try:
                plot_range = int(value)
            except ValueError:
                _append_error(errors, f"Invalid integer for 'range': {value!r}")
                continue
            if plot_range <= 0:
                _append_error(errors, f"'range' must be positive, got {plot_range}.")
            else:
                cfg.plot_range = plot_range
        elif key == "png_filename":
            if not value:
                _append_error(errors, "'png_filename' must not be empty.")
            else:
                cfg.png_filename = value
        elif key == "input_csv":
            cfg.input_csv = value or None
        elif key == "output":
            cfg.output = value or None
        else:
            _append_error(errors, f"Unknown setting '{key}'.")

    if errors:
        raise ValueError("\n".join(errors))
    return cfg


__all__ = ["HullInputError", "apply_overrides_to_config", "validate_hull_input"]
