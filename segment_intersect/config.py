"""Configuration helpers for the relate pipeline."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class RelateConfig:
    """Knobs shared by the orientation predicate, rescaling and diagnostics."""

    exact_orientation: bool = True
    rescale_range: float = 10_000_000.0
    report_robustness: bool = True


_RELATE_CONFIG = RelateConfig()


def get_relate_config() -> RelateConfig:
    return copy.deepcopy(_RELATE_CONFIG)


def set_relate_config(config: RelateConfig) -> None:
    global _RELATE_CONFIG
    _RELATE_CONFIG = copy.deepcopy(config)


def current_relate_config() -> RelateConfig:
    """Return the active configuration without copying it.

    Used on the per-pair hot path; callers must not mutate the result.
    """

    return _RELATE_CONFIG
