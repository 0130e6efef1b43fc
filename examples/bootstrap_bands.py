"""Mean +/- 95% CI bands for two noisy curves over a shared x range.

Prints the generated line points and error-bar markers as tables.
"""

import numpy as np

from errorpoints import (
    FloatRange,
    PointGenerator,
    SpacingConfig,
    generate_from_config,
    linear_interpolation_function,
    mean_and_conf95,
)
from errorpoints.utils.logging import configure_logging

configure_logging(level="DEBUG")

rng = np.random.default_rng(42)


def noisy_sine(x: float) -> np.ndarray:
    """Twenty repeated trials of sin(x) with gaussian noise."""
    return np.sin(x) + rng.normal(scale=0.2, size=20)


# Sparse measurements every 0.5, blended into a generator
samples = {
    float(k): (np.cos(k) + rng.normal(scale=0.1, size=20)).tolist()
    for k in np.arange(1.0, 8.5, 0.5)
}
sparse = linear_interpolation_function(samples)

data_range = FloatRange(0.0, 10.0)
generators = [
    PointGenerator(noisy_sine, data_range),
    # the midpoint function is undefined at/after its last key
    PointGenerator(sparse, FloatRange(1.0, 7.99)),
]

results = generate_from_config(
    SpacingConfig(num_points=41, num_error_bars=8),
    mean_and_conf95,
    data_range,
    generators,
)

for name, result in zip(["noisy_sine", "sparse_cosine"], results):
    print(f"== {name}: line")
    print(result.points_dataframe().to_string())
    print(f"== {name}: error bars")
    print(result.error_points_dataframe().to_string())
