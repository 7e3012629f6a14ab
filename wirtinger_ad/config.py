from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ADConfig:
    """Process-wide settings for the forward-mode engine."""

    rtol: float = 1e-5  # approximate equality of duals
    atol: float = 1e-8
    warn_on_overwrite: bool = True  # log when a rule replaces another


_config = ADConfig()


def get_config() -> ADConfig:
    return _config


@contextmanager
def configure(**overrides):
    """
    Temporarily replace fields of the active config:

        with configure(atol=1e-12):
            assert d1.isclose(d2)
    """
    global _config
    prev = _config
    try:
        _config = replace(prev, **overrides)
        yield _config
    finally:
        _config = prev
