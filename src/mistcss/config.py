from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ComponentMode(Enum):
    """How a stylesheet maps onto components."""

    MULTI = "multi"  # one component per @scope declaration
    SINGLE = "single"  # the whole file is one component named after the module


@dataclass(frozen=True)
class MistConfig:
    mode: ComponentMode = ComponentMode.MULTI
    encoding: str = "utf-8"
