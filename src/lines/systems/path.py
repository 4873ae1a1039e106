from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional

from lines.components.coordinate import Coordinate
from lines.components.tile_map import TileMap
from lines.systems.grid import Grid


def find_path(grid: Grid, tile_map: TileMap, origin: Coordinate, target: Coordinate) -> Optional[List[Coordinate]]:
    """Breadth-first search for a corridor of empty cells from origin to target.

    Returns the path including both ends, or None when target is occupied or walled off.
    The origin cell itself is normally occupied by the moving ball; only the cells
    entered after it must be empty.
    """
    if origin == target:
        return [origin]
    if not tile_map.is_empty(target):
        return None
    previous: Dict[Coordinate, Coordinate] = {}
    visited = {origin}
    queue = deque([origin])
    while queue:
        current = queue.popleft()
        if current == target:
            return _reconstruct(previous, origin, target)
        for neighbor in grid.neighbors(current):
            if neighbor in visited or not tile_map.is_empty(neighbor):
                continue
            visited.add(neighbor)
            previous[neighbor] = current
            queue.append(neighbor)
    return None


def _reconstruct(previous: Dict[Coordinate, Coordinate], origin: Coordinate, target: Coordinate) -> List[Coordinate]:
    path = [target]
    current = target
    while current != origin:
        current = previous[current]
        path.append(current)
    path.reverse()
    return path

