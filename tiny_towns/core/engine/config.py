from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RulesConfig:
    allow_rotations: bool = True
    allow_mirrors: bool = True


DEFAULT_RULES = RulesConfig()
