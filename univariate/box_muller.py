import numpy as np
import numba as nb

TWO_PI = 2.0 * np.pi


@nb.njit()
def seed(value):
    """
    Seed the generator used by the jitted samplers.

    Numba keeps its own random state, so np.random.seed called from the
    interpreter has no effect on sample / sample_batch.
    """
    np.random.seed(value)


@nb.njit()
def sample(mean, standard_deviation):
    """
    Draw one normal variate with the Box-Muller transform.

    Parameters:
        mean: Mean of the distribution (scalar).
        standard_deviation: Standard deviation (scalar, > 0).

    Returns:
        One random sample.
    """
    # 1 - U keeps u1 in (0, 1] so the log is finite.
    u1 = 1.0 - np.random.random()
    u2 = np.random.random()
    z0 = np.sqrt(-2.0 * np.log(u1)) * np.cos(TWO_PI * u2)
    return z0 * standard_deviation + mean


@nb.njit()
def sample_batch(mean, standard_deviation, size):
    """
    Draw `size` independent normal variates, one Box-Muller call each.
    """
    out = np.empty(size)
    for i in range(size):
        out[i] = sample(mean, standard_deviation)
    return out
