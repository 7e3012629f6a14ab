import numpy as np
from scipy.special import digamma, gamma

from wirtinger_ad.forward.core.registry import registry

_TWO_OVER_SQRT_PI = 2 / np.sqrt(np.pi)


@registry.register("erf")
def _erf_rule(z):
    return (_TWO_OVER_SQRT_PI * np.exp(-(z**2)),)


@registry.register("erfc")
def _erfc_rule(z):
    return (-_TWO_OVER_SQRT_PI * np.exp(-(z**2)),)


@registry.register("gamma")
def _gamma_rule(z):
    return (gamma(z) * digamma(z),)


@registry.register("loggamma")
def _loggamma_rule(z):
    return (digamma(z),)
