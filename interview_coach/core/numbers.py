import math
import time
from typing import Iterable


def clamp(value: float, minimum: float = 0.0, maximum: float = 100.0) -> float:
    return max(minimum, min(maximum, float(value)))


def round_half_up(value: float) -> int:
    # x.5 rounds toward +inf, matching the browser client's Math.round
    return int(math.floor(float(value) + 0.5))


def mean(values: Iterable[float]) -> float:
    items = [float(v) for v in values]
    return sum(items) / len(items) if items else 0.0


def population_stddev(values: Iterable[float]) -> float:
    items = [float(v) for v in values]
    if not items:
        return 0.0
    avg = sum(items) / len(items)
    variance = sum((v - avg) ** 2 for v in items) / len(items)
    return variance ** 0.5


def now_ms() -> int:
    return int(time.time() * 1000)
