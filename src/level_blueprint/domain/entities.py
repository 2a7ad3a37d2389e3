"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BlueprintVariant(str, Enum):
    """Deployment flavour of the blueprint output contract."""

    WITH_LAYOUT_DATA = "with-layout-data"
    WITHOUT_LAYOUT_DATA = "without-layout-data"


@dataclass(frozen=True, slots=True)
class BlueprintResult:
    """Raw generated text returned to the caller, never parsed."""

    content: str
