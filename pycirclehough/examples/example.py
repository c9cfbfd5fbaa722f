"""
Example: Find the center of a synthetic log profile with the circle Hough accumulator.
"""
import os
import sys
import time

import numpy as np

# Add the current directory to the path to allow importing local modules
current_dir = os.path.dirname(os.path.abspath(__file__))
parent_dir = os.path.dirname(os.path.dirname(current_dir))
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)

from pycirclehough import (CenterHistory, DEFAULT_CONSTRAINTS, DEFAULT_RADIUS, HoughLogger,
                           LogLevel, create, free, generate_circle_profile, set_logger, to_inches)


def main():
    logger = HoughLogger(mode='console', console_level=LogLevel.DEBUG)
    set_logger(logger)

    circle_hough = create(DEFAULT_RADIUS, DEFAULT_CONSTRAINTS)
    if circle_hough is None:
        logger.error("Failed to create circle hough")
        return 1

    history = CenterHistory(max_size=100)
    rng = np.random.default_rng(42)
    start = time.time()
    # Simulate a log drifting across the scan window
    for frame in range(10):
        center = (1000 + 150 * frame, 2000 - 100 * frame)
        profile = generate_circle_profile(center, DEFAULT_RADIUS, n_points=300, noise=10.0,
                                          camera=0, seed=int(rng.integers(1 << 31)))
        result = circle_hough.map(profile)
        history.add(profile.camera, time.time() - start, result)
        logger(f"frame {frame}: truth=({to_inches(center[0]):.3f}, {to_inches(center[1]):.3f}) in, "
               f"found=({to_inches(result.x):.3f}, {to_inches(result.y):.3f}) in, weight={result.weight:.4f}")

    track = history.as_array(0)
    logger(f"Tracked {len(track)} centers, mean weight {track[:, 3].mean():.4f}")
    free(circle_hough)
    return 0


if __name__ == '__main__':
    sys.exit(main())
