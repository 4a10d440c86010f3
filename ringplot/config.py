"""Process-wide rendering configuration."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Tunables shared by the layout engine and the TikZ backend."""

    precision: int = 4
    font_size: float = 8.0
    closed_tolerance: float = 1e-12


_RENDER_CONFIG = RenderConfig()


def get_render_config() -> RenderConfig:
    return copy.deepcopy(_RENDER_CONFIG)


def closed_tolerance() -> float:
    """Return the full-turn tolerance without copying the whole config."""

    return _RENDER_CONFIG.closed_tolerance


def set_render_config(config: RenderConfig) -> None:
    global _RENDER_CONFIG
    _RENDER_CONFIG = copy.deepcopy(config)
