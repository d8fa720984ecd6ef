# hexgrid.py - spherical hex-grid addressing behind a small interface
from __future__ import annotations

from typing import Iterable, List, Protocol, Set, Tuple

import h3

CellId = str
LatLon = Tuple[float, float]


class GridIndex(Protocol):
    """Hierarchical spherical hex grid consumed by the pipeline.

    All calls are pure and total for valid ids.  ``neighbors`` is topological:
    the returned set includes ``cell`` itself plus every cell within
    ``ring`` steps of it.
    """

    def base_cells(self) -> Set[CellId]: ...

    def children(self, cell: CellId, resolution: int) -> Set[CellId]: ...

    def neighbors(self, cell: CellId, ring: int = 1) -> Set[CellId]: ...

    def centroid(self, cell: CellId) -> LatLon: ...


class H3GridIndex:
    """``GridIndex`` backed by Uber's H3 (122 base cells, aperture 7)."""

    def base_cells(self) -> Set[CellId]:
        return set(h3.get_res0_cells())

    def children(self, cell: CellId, resolution: int) -> Set[CellId]:
        return set(h3.cell_to_children(cell, resolution))

    def neighbors(self, cell: CellId, ring: int = 1) -> Set[CellId]:
        return set(h3.grid_disk(cell, ring))

    def centroid(self, cell: CellId) -> LatLon:
        lat, lon = h3.cell_to_latlng(cell)
        return float(lat), float(lon)

    def cell_at(self, lat: float, lon: float, resolution: int) -> CellId:
        """Cell containing (lat, lon) at ``resolution``; used by renderers."""
        return h3.latlng_to_cell(lat, lon, resolution)


def expand_cells(grid: GridIndex, resolution: int) -> List[CellId]:
    """Enumerate every cell at ``resolution`` in a stable order.

    Base cells are visited in sorted order and each one's children are
    emitted sorted, so the enumeration only depends on the grid itself.
    Resolution 0 returns the base cells unchanged.
    """
    base = sorted(grid.base_cells())
    if resolution <= 0:
        return base
    out: List[CellId] = []
    for cell in base:
        out.extend(sorted(grid.children(cell, resolution)))
    return out


def ring_neighbors(grid: GridIndex, cell: CellId, ring: int = 1) -> List[CellId]:
    """``grid.neighbors`` without ``cell`` itself, sorted for repeatable ties."""
    return sorted(n for n in grid.neighbors(cell, ring) if n != cell)


def centroids(grid: GridIndex, cells: Iterable[CellId]) -> List[LatLon]:
    return [grid.centroid(c) for c in cells]
