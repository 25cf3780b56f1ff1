import os

import io
import numpy as np
from tqdm import tqdm

from univariate.box_muller import seed
from univariate.gaussian import Gaussian
from cProfile import Profile
import pstats

def main():
    size = int(os.getenv("SAMPLE_SIZE", "3000000"))
    mean = float(os.getenv("GAUSSIAN_MEAN", "-1.0"))
    variance = float(os.getenv("GAUSSIAN_VARIANCE", "0.65"))
    repeats = int(os.getenv("N_REPEATS", "5"))
    if os.getenv("SEED") is not None:
        seed(int(os.getenv("SEED")))

    d = Gaussian(mean, variance)
    d.random(1)  # compile outside the profile
    profiler = Profile()
    profiler.enable()
    moments = []
    for _ in tqdm(range(repeats), desc="sampling"):
        x = d.random(size)
        moments.append((x.mean(), x.var()))
    profiler.disable()
    buf = io.StringIO()
    stats = pstats.Stats(profiler, stream=buf).strip_dirs().sort_stats("cumulative")
    stats.print_stats(30)
    print(buf.getvalue())

    moments = np.array(moments)
    print(f"{d}: {repeats} x {size} samples")
    print(f"mean      target={mean:.4f}  empirical={moments[:, 0].mean():.5f}")
    print(f"variance  target={variance:.4f}  empirical={moments[:, 1].mean():.5f}")

if __name__ == "__main__":
    main()
