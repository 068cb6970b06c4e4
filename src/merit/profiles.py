from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from .config import DEFAULT_HORIZON, validate_horizon


def as_profile(values: Sequence[float]) -> np.ndarray:
    """Coerce a sequence of per-frame values into a read-only float array."""
    profile = np.array(values, dtype=float)
    if profile.ndim != 1:
        raise ValueError("profile must be one-dimensional")
    profile.setflags(write=False)
    return profile


def flat_profile(horizon: int = DEFAULT_HORIZON, value: float = 1.0) -> np.ndarray:
    return as_profile(np.full(validate_horizon(horizon), float(value)))


def random_profile(horizon: int = DEFAULT_HORIZON, seed: Optional[int] = None) -> np.ndarray:
    """Uniform random values in [0, 1), one per frame."""
    rng = np.random.default_rng(seed)
    return as_profile(rng.random(validate_horizon(horizon)))


def diurnal_profile(
    horizon: int = DEFAULT_HORIZON,
    sunrise_hour: float = 6.0,
    sunset_hour: float = 18.0,
    seasonal_amplitude: float = 0.15,
) -> np.ndarray:
    """
    Sine-shaped daylight profile, normalised so the highest frame is 1.0.

    Notes:
    - Production is zero outside [sunrise_hour, sunset_hour].
    - Seasonality scales the daily curve by +/- seasonal_amplitude over the year.
    """
    if sunset_hour <= sunrise_hour:
        raise ValueError("sunset_hour must be after sunrise_hour")

    n = validate_horizon(horizon)
    t = np.arange(n, dtype=float)
    hours = t % 24.0
    days = t / 24.0

    daylight = sunset_hour - sunrise_hour
    solar_angle = math.pi * (hours - sunrise_hour) / daylight
    diurnal = np.where(
        (hours >= sunrise_hour) & (hours <= sunset_hour),
        np.maximum(0.0, np.sin(solar_angle)),
        0.0,
    )

    seasonal = 1.0 + seasonal_amplitude * np.sin(2 * math.pi * days / 365.0 - math.pi / 2)
    raw = diurnal * seasonal

    peak = float(np.max(raw)) if raw.size else 0.0
    if peak <= 1e-9:
        return as_profile(np.zeros(n))
    return as_profile(raw / peak)
