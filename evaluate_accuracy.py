import numpy as np
import pandas as pd
from scipy.special import erfc as erfc_sp, erfcinv as erfcinv_sp
from scipy.stats import norm

from univariate.erfc import erfc_batch, ierfc_batch
from univariate.gaussian import Gaussian


def max_abs_error(approx, ref):
    err = np.abs(np.asarray(approx) - np.asarray(ref))
    i = int(np.argmax(err))
    return err[i], i


def evaluate(mean=0.0, variance=1.0, n_points=10001):
    """
    Compare the approximations against scipy over fixed grids.

    Returns:
        DataFrame indexed by function with max abs error and where it occurs.
    """
    d = Gaussian(mean, variance)
    ref = norm(loc=mean, scale=d.standard_deviation)

    x = np.linspace(-6.0, 6.0, n_points)
    q = np.linspace(1e-4, 2.0 - 1e-4, n_points)
    p = np.linspace(1e-4, 1.0 - 1e-4, n_points)
    xs = mean + x * d.standard_deviation

    cases = {
        "erfc": (x, erfc_batch(x), erfc_sp(x)),
        "ierfc": (q, ierfc_batch(q), erfcinv_sp(q)),
        "pdf": (xs, d.pdf(xs), ref.pdf(xs)),
        "cdf": (xs, d.cdf(xs), ref.cdf(xs)),
        "ppf": (p, d.ppf(p), ref.ppf(p)),
    }

    rows = {}
    for name, (grid, approx, exact) in cases.items():
        err, i = max_abs_error(approx, exact)
        rows[name] = {"max_abs_err": err, "at": grid[i]}
    return pd.DataFrame.from_dict(rows, orient="index")


def main():
    results = evaluate()
    print("Max absolute error against scipy (standard normal):")
    for name, row in results.iterrows():
        print(f"{name:6s}  err={row['max_abs_err']:.3e}  at={row['at']:.4f}")


if __name__ == "__main__":
    main()
