import numpy as np


def make_rng(seed: int | None = None, rng: np.random.Generator | None = None) -> np.random.Generator:
    """Return `rng` if given, otherwise a fresh generator seeded with `seed`."""
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def clamp01(x):
    x = np.asarray(x, dtype=float)
    return np.clip(x, 0.0, 1.0)


def centered_noise(rng: np.random.Generator, noise_level: float, size) -> np.ndarray:
    """Uniform noise in [-noise_level/2, noise_level/2)."""
    return (rng.random(size) - 0.5) * noise_level
