from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .naming import DEFAULT_NAMING, InputNaming

__all__ = ["BuilderConfig", "DEFAULT_CONFIG"]


@dataclass(frozen=True)
class BuilderConfig:
    """Options shared by the builder and the relation resolver.

    Attributes:
        naming: Naming policy for derived input type names.
        id_field: Name of the unique key used for ``connect``/``where`` objects.
    """

    naming: InputNaming = field(default_factory=InputNaming)
    id_field: str = "id"

    def clone_with(self, **overrides: Any) -> "BuilderConfig":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


DEFAULT_CONFIG = BuilderConfig(naming=DEFAULT_NAMING)
