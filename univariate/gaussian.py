import numbers

import numpy as np
import numba as nb

from univariate.box_muller import sample_batch
from univariate.erfc import erfc, ierfc

SQRT2 = np.sqrt(2.0)
SQRT2PI = np.sqrt(2.0 * np.pi)


class InvalidParameter(ValueError):
    """
    Raised when a distribution would have a non-positive or non-finite variance.

    The offending number is kept on ``value``.
    """

    def __init__(self, value, message=None):
        if message is None:
            message = f"Variance must be > 0 (but was: {value})"
        super().__init__(message)
        self.value = value


@nb.njit()
def pdf(x, mean, variance, std):
    """
    Probability density function of a univariate normal distribution.
    """
    return np.exp(-((x - mean) ** 2) / (2.0 * variance)) / (std * SQRT2PI)


@nb.njit()
def cdf(x, mean, std):
    """
    Cumulative distribution function, via the erfc approximation.
    """
    return 0.5 * erfc(-(x - mean) / (std * SQRT2))


@nb.njit()
def ppf(p, mean, std):
    """
    Percent point function (inverse CDF), via the inverse erfc.

    For p outside (0, 1) the result is built from the ierfc bounds, so it sits
    about 141 standard deviations from the mean rather than at infinity.
    """
    return mean - std * SQRT2 * ierfc(2.0 * p)


@nb.njit(parallel=True)
def pdf_batch(x, mean, variance, std):
    out = np.empty(x.shape[0])
    for i in nb.prange(x.shape[0]):
        out[i] = pdf(x[i], mean, variance, std)
    return out


@nb.njit(parallel=True)
def cdf_batch(x, mean, std):
    out = np.empty(x.shape[0])
    for i in nb.prange(x.shape[0]):
        out[i] = cdf(x[i], mean, std)
    return out


@nb.njit(parallel=True)
def ppf_batch(p, mean, std):
    out = np.empty(p.shape[0])
    for i in nb.prange(p.shape[0]):
        out[i] = ppf(p[i], mean, std)
    return out


class Gaussian:
    """
    Immutable one-dimensional normal distribution N(mean, variance).

    Products and quotients are the (renormalised) products and quotients of
    the two densities, combined in precision space. Sums, differences and
    scaling follow the rules for independent random variables.
    """

    def __init__(self, mean, variance):
        """
        Parameters:
            mean: Mean of the distribution (scalar).
            variance: Variance of the distribution (scalar, finite, > 0).

        Raises:
            InvalidParameter: if variance is not > 0 or not finite.
        """
        if not variance > 0:
            raise InvalidParameter(variance)
        if not np.isfinite(variance):
            raise InvalidParameter(
                variance, f"Variance must be finite (but was: {variance})"
            )
        self._mean = mean
        self._variance = variance
        self._std = float(np.sqrt(variance))

    @classmethod
    def from_precision(cls, precision, precision_mean):
        """
        Build a distribution from its precision (1 / variance) and
        precision-adjusted mean (mean / variance).
        """
        if not precision > 0:
            raise InvalidParameter(
                precision, f"Precision must be > 0 (but was: {precision})"
            )
        return cls(precision_mean / precision, 1.0 / precision)

    @property
    def mean(self):
        return self._mean

    @property
    def variance(self):
        return self._variance

    @property
    def standard_deviation(self):
        return self._std

    @property
    def precision(self):
        return 1.0 / self._variance

    @property
    def precision_mean(self):
        return self._mean / self._variance

    def _evaluate(self, kernel, batch, x, *params):
        if np.ndim(x) == 0:
            return float(kernel(float(x), *params))
        arr = np.asarray(x, dtype=np.float64)
        return batch(arr.ravel(), *params).reshape(arr.shape)

    def pdf(self, x):
        """Probability density at x (scalar or array)."""
        return self._evaluate(pdf, pdf_batch, x, float(self._mean), float(self._variance), self._std)

    def cdf(self, x):
        """Cumulative probability at x (scalar or array)."""
        return self._evaluate(cdf, cdf_batch, x, float(self._mean), self._std)

    def ppf(self, p):
        """
        Quantile at probability p (scalar or array).

        Only meaningful for p in (0, 1); see `ppf` for what is returned at
        or beyond the ends.
        """
        return self._evaluate(ppf, ppf_batch, p, float(self._mean), self._std)

    def product(self, other):
        """Normalised product of the two densities."""
        return Gaussian.from_precision(
            self.precision + other.precision,
            self.precision * self._mean + other.precision * other.mean,
        )

    def quotient(self, other):
        """
        Normalised quotient of the two densities.

        Raises InvalidParameter unless other has a strictly larger variance
        than this distribution, since the combined precision must stay > 0.
        """
        return Gaussian.from_precision(
            self.precision - other.precision,
            self.precision * self._mean - other.precision * other.mean,
        )

    def mul(self, other):
        """Product with another Gaussian, or scaling by a constant."""
        if isinstance(other, Gaussian):
            return self.product(other)
        return self.scale(other)

    def div(self, other):
        """
        Quotient with another Gaussian, or scaling by 1 / constant.

        Raises InvalidParameter for a zero constant.
        """
        if isinstance(other, Gaussian):
            return self.quotient(other)
        if other == 0:
            raise InvalidParameter(other, f"Divisor must be != 0 (but was: {other})")
        return self.scale(1.0 / other)

    def add(self, other):
        """Distribution of the sum of two independent variables."""
        return Gaussian(self._mean + other.mean, self._variance + other.variance)

    def sub(self, other):
        """Distribution of the difference of two independent variables."""
        return Gaussian(self._mean - other.mean, self._variance + other.variance)

    def scale(self, c):
        """Distribution of c * X. Raises InvalidParameter for c == 0."""
        return Gaussian(self._mean * c, self._variance * c * c)

    def random(self, n):
        """
        Draw n independent samples.

        Parameters:
            n: Number of samples (int, >= 0).

        Returns:
            1D numpy array of length n.
        """
        if n < 0:
            raise ValueError(f"Number of samples must be >= 0 (but was: {n})")
        return sample_batch(float(self._mean), self._std, int(n))

    def __mul__(self, other):
        if isinstance(other, (Gaussian, numbers.Real)):
            return self.mul(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, (Gaussian, numbers.Real)):
            return self.div(other)
        return NotImplemented

    def __add__(self, other):
        if isinstance(other, Gaussian):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Gaussian):
            return self.sub(other)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Gaussian):
            return NotImplemented
        return self._mean == other.mean and self._variance == other.variance

    def __hash__(self):
        return hash((self._mean, self._variance))

    def __repr__(self):
        return f"Gaussian(mean={self._mean!r}, variance={self._variance!r})"


def gaussian(mean, variance):
    """Create a Gaussian(mean, variance)."""
    return Gaussian(mean, variance)
