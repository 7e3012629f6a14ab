import numpy as np
from numba import complex128, float64, vectorize


@vectorize([complex128(complex128)], cache=True)
def _principal_log(z):
    if z == 0:
        return complex(-np.inf, 0.0)
    return complex(np.log(abs(z)), np.arctan2(z.imag, z.real))


@vectorize([float64(float64)], cache=True)
def _real_log(x):
    if x == 0:
        return -np.inf
    return np.log(x)


def complex_log(z):
    """
    Natural log that takes the principal complex branch off the positive
    real axis instead of returning nan.

    Used for the exponent partial of `power`, so 0 maps to -inf without a
    divide-by-zero warning.
    """
    arr = np.asarray(z)
    if np.iscomplexobj(arr) or np.any(arr < 0):
        return _principal_log(arr.astype(np.complex128))
    return _real_log(arr.astype(np.float64))
