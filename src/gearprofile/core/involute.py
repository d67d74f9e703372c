"""
Involute-of-a-circle sampling.

The involute is parametrised by the unwinding angle t:

    x = rb (cos t + t sin t)
    y = rb (sin t - t cos t)
    r(t) = rb sqrt(1 + t²)

It starts on the base circle at t = 0. Samples are spaced uniformly in t,
not in arc length, so flanks are slightly denser near the base circle.
"""

import math
from dataclasses import dataclass
from typing import List

from ..io.loaders import MIN_SAMPLES
from .outline import Point


@dataclass(frozen=True)
class InvoluteSample:
    """Sampled involute flank"""
    points: List[Point]  # samples + 1 points, t = 0 .. t_max
    t_max: float


def involute_point(rb: float, t: float) -> Point:
    ct, st = math.cos(t), math.sin(t)
    return (rb * (ct + t * st), rb * (st - t * ct))


def involute_parameter(rb: float, radius: float) -> float:
    """
    Parameter t at which the involute reaches ``radius``.

    Radii inside the base circle clamp to t = 0.
    """
    return math.sqrt(max(0.0, (radius * radius) / (rb * rb) - 1))


def sample_involute(rb: float, r_target: float, samples: int) -> InvoluteSample:
    """
    Sample the involute from the base circle out to ``r_target``.

    Args:
        rb: Base circle radius (> 0)
        r_target: Radius to stop at; below rb the curve has zero length
            and every sample sits on the base circle
        samples: Number of intervals (samples + 1 points), at least MIN_SAMPLES

    Returns:
        InvoluteSample with the points and the final parameter t_max
    """
    samples = max(MIN_SAMPLES, samples)
    t_max = involute_parameter(rb, r_target)
    points = [involute_point(rb, t_max * (i / samples)) for i in range(samples + 1)]
    return InvoluteSample(points=points, t_max=t_max)
