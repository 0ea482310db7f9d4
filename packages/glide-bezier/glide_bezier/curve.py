"""Piecewise-linear Bezier curve used as a time -> progress easing function.

The curve is sampled once at construction. Lookups scan the samples for the
pair bracketing the requested time and interpolate linearly between them, so
the curve must be monotonic in x (true whenever both interior control points
have x in [0, 1]).
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from glide_bezier.types import InvalidArgumentError, Point

if TYPE_CHECKING:
    from glide_bezier.presets import EasingPreset

DEFAULT_SMOOTHNESS = 0.07

_START = Point(0.0, 0.0)
_END = Point(1.0, 1.0)


def quadratic_point(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    """B(t) = P0(1-t)^2 + 2*P1*t(1-t) + P2*t^2"""
    inv = 1.0 - t
    a = inv * inv
    b = 2.0 * t * inv
    c = t * t
    return Point(
        a * p0.x + b * p1.x + c * p2.x,
        a * p0.y + b * p1.y + c * p2.y,
    )


def cubic_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """B(t) = P0(1-t)^3 + 3*P1*t(1-t)^2 + 3*P2*t^2(1-t) + P3*t^3"""
    inv = 1.0 - t
    inv_sq = inv * inv
    a = inv_sq * inv
    b = 3.0 * t * inv_sq
    c = 3.0 * t * t * inv
    d = t * t * t
    return Point(
        a * p0.x + b * p1.x + c * p2.x + d * p3.x,
        a * p0.y + b * p1.y + c * p2.y + d * p3.y,
    )


class BezierCurve:
    """Immutable sampled Bezier curve.

    ``BezierCurve(smoothness)`` only validates and stores the sampling step;
    use :meth:`from_controls`, :meth:`from_preset` or :meth:`with_points` to
    get a curve that can answer :meth:`progress_at`.
    """

    __slots__ = ("_smoothness", "_samples")

    def __init__(self, smoothness: float = DEFAULT_SMOOTHNESS) -> None:
        if smoothness <= 0.0 or smoothness >= 1.0:
            raise InvalidArgumentError(
                f"smoothness must be between 0 and 1 (both exclusive), got {smoothness!r}"
            )
        self._smoothness = float(smoothness)
        self._samples: tuple[Point, ...] = ()

    @classmethod
    def from_controls(
        cls,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        smoothness: float = DEFAULT_SMOOTHNESS,
    ) -> BezierCurve:
        """Standard easing curve with endpoints fixed at (0, 0) and (1, 1)."""
        return cls(smoothness).with_points(
            [_START, Point(x1, y1), Point(x2, y2), _END]
        )

    @classmethod
    def from_preset(
        cls, preset: EasingPreset, smoothness: float = DEFAULT_SMOOTHNESS
    ) -> BezierCurve:
        return cls.from_controls(*preset.controls, smoothness=smoothness)

    def with_points(self, points: Sequence[Point]) -> BezierCurve:
        """Return a new curve with the same smoothness sampled from ``points``."""
        curve = BezierCurve(self._smoothness)
        curve._samples = tuple(self.sample(points))
        return curve

    @property
    def smoothness(self) -> float:
        return self._smoothness

    @property
    def samples(self) -> tuple[Point, ...]:
        return self._samples

    def sample(self, points: Sequence[Point] | None) -> list[Point]:
        """Sample a quadratic (3 points) or cubic (4 points) curve.

        Emits the first control point, then B(k * smoothness) for each k >= 1
        below t=1, then the terminal point (1, 1).
        """
        if points is None:
            raise InvalidArgumentError("control point list is missing")
        if len(points) not in (3, 4):
            raise InvalidArgumentError(
                f"expected 3 or 4 control points, got {len(points)}"
            )

        p0 = points[0]
        out = [p0]
        k = 1
        t = self._smoothness
        while t < 1.0:
            if len(points) == 3:
                out.append(quadratic_point(p0, points[1], points[2], t))
            else:
                out.append(cubic_point(p0, points[1], points[2], points[3], t))
            k += 1
            t = k * self._smoothness
        out.append(_END)
        return out

    def progress_at(self, time_fraction: float) -> float:
        if time_fraction < 0.0 or time_fraction > 1.0:
            raise InvalidArgumentError(
                f"time fraction must be within [0, 1], got {time_fraction!r}"
            )
        samples = self._samples
        if len(samples) < 2:
            raise InvalidArgumentError("curve has no samples")

        c1 = c2 = samples[0]
        for i in range(len(samples) - 1):
            c1 = samples[i]
            c2 = samples[i + 1]
            if c1.x <= time_fraction <= c2.x:
                break

        span = c2.x - c1.x
        if span == 0.0:
            raise InvalidArgumentError(
                f"degenerate curve: adjacent samples share x={c1.x!r}"
            )
        x = time_fraction
        return (c2.y * (x - c1.x) + c1.y * (c2.x - x)) / span

    __call__ = progress_at

    def __repr__(self) -> str:
        return f"BezierCurve(smoothness={self._smoothness!r}, samples={len(self._samples)})"
