"""Plain storage for a sampled function."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FunctionModel:
    """Holds the sampled values of a function."""

    data: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.data = list(self.data)