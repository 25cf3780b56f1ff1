import os
import numpy as np
import matplotlib.pyplot as plt

from univariate.gaussian import Gaussian


def main():
    prior = Gaussian(0.0, 2.0)
    likelihood = Gaussian(1.5, 0.5)
    posterior = prior.mul(likelihood)

    samples = prior.random(200_000)
    x = np.linspace(-6.0, 6.0, 600)

    fig, axes = plt.subplots(1, 2, figsize=(10, 4))

    axes[0].hist(samples, bins=120, density=True, alpha=0.4, label="Samples")
    axes[0].plot(x, prior.pdf(x), label=f"{prior}")
    axes[0].plot(x, likelihood.pdf(x), "--", label=f"{likelihood}")
    axes[0].plot(x, posterior.pdf(x), label=f"Product {posterior.mean:.2f}, {posterior.variance:.2f}")
    axes[0].set_title("Density")
    axes[0].grid(True, alpha=0.3)
    axes[0].legend(fontsize="small")

    axes[1].plot(x, prior.cdf(x), label="Prior")
    axes[1].plot(x, posterior.cdf(x), label="Product")
    for q in (0.1, 0.5, 0.9):
        axes[1].axvline(posterior.ppf(q), color="grey", alpha=0.4)
    axes[1].set_title("Cumulative distribution (product quantiles 0.1 / 0.5 / 0.9)")
    axes[1].grid(True, alpha=0.3)
    axes[1].legend()

    fig.tight_layout()
    os.makedirs("plots", exist_ok=True)
    out_path = os.path.join("plots", "gaussian.png")
    fig.savefig(out_path, dpi=150)
    print(f"Saved plot to {out_path}")


if __name__ == "__main__":
    main()
