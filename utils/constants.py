"""Fixed sizes and kernels used by the hashing pipeline."""

import numpy as np

WORKING_SIZE = 32
SMALLER_SIZE = 8
HASH_BITS = 64
HASH_MASK = (1 << HASH_BITS) - 1

# Conventional cut-off: distance below this means "same picture"
SIMILARITY_THRESHOLD = 5

# 3x3 discrete Gaussian approximation used after upscaling small images
SMOOTHING_KERNEL = np.array([
    [0.0625, 0.125, 0.0625],
    [0.125,  0.25,  0.125],
    [0.0625, 0.125, 0.0625],
], dtype=np.float32)

INTERPOLATION_MODES = ('nearest', 'area', 'bilinear')
TRANSFORM_MODES = ('direct', 'fast')
