# scalargrad/core/config.py
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, replace

BACKWARD_MODES = ("topological", "recursive")


@dataclass
class EngineConfig:
    """Configuration for the backward engine."""
    # Traversal: 'topological' (each node's rule applied once) or
    # 'recursive' (re-walks shared sub-expressions once per incoming edge)
    backward_mode: str = "topological"

    # Logging
    verbose: bool = False

    def __post_init__(self):
        if self.backward_mode not in BACKWARD_MODES:
            raise ValueError(f"Unknown backward mode: {self.backward_mode}")


# Global default configuration (swapped by use_config)
default_config = EngineConfig()


def get_config() -> EngineConfig:
    return default_config


@contextmanager
def use_config(config: EngineConfig = None, **overrides):
    """
    Context manager to temporarily change the active configuration:
        with use_config(backward_mode="recursive", verbose=True):
            ... build computation ...
            backward(y)
    """
    from . import config as _config_mod  # module access so callers see the swap
    prev = _config_mod.default_config
    try:
        _config_mod.default_config = replace(config or prev, **overrides)
        yield _config_mod.default_config
    finally:
        _config_mod.default_config = prev
