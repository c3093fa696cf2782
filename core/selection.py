"""Detail selection, held as a name reference into the committed catalog."""

from __future__ import annotations

from dataclasses import dataclass

from core.catalog import Catalog
from core.models import AssetRecord


@dataclass(frozen=True)
class SelectionState:
    name: str | None = None

    @property
    def is_open(self) -> bool:
        return self.name is not None


def select(name: str) -> SelectionState:
    return SelectionState(name=name)


def clear() -> SelectionState:
    return SelectionState()


def resolve(selection: SelectionState, catalog: Catalog) -> AssetRecord | None:
    if selection.name is None:
        return None
    return catalog.find(selection.name)


def prune(selection: SelectionState, catalog: Catalog) -> SelectionState:
    """Dismiss the selection if its asset left the catalog."""
    if selection.name is not None and catalog.find(selection.name) is None:
        return clear()
    return selection
