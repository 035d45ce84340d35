
"""Coordinate collections: cells grouped by row, columns kept sorted"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

Cell = Tuple[int, int]  # (row, col)


@dataclass
class Coords:
    rows: List[int] = field(default_factory=list)
    by_row: Dict[int, List[int]] = field(default_factory=dict)

    def __contains__(self, cell) -> bool:
        row, col = cell
        return col in self.by_row.get(row, ())

    def __len__(self) -> int:
        return sum(len(self.by_row[r]) for r in self.rows)

    def copy(self) -> "Coords":
        return Coords(list(self.rows), {r: list(c) for r, c in self.by_row.items()})

    def all_cols(self) -> List[int]:
        """Every column of every cell, sorted (duplicates kept)."""
        return sorted(c for r in self.rows for c in self.by_row[r])


def translate(coords: Coords, d_col: int, d_row: int) -> Coords:
    return Coords(
        [r + d_row for r in coords.rows],
        {r + d_row: [c + d_col for c in coords.by_row[r]] for r in coords.rows},
    )


def to_flat(coords: Coords) -> List[Cell]:
    return [(r, c) for r in coords.rows for c in coords.by_row[r]]


def from_flat(cells: Iterable[Cell]) -> Coords:
    by_row: Dict[int, set] = {}
    for r, c in cells:
        by_row.setdefault(r, set()).add(c)
    return Coords(sorted(by_row), {r: sorted(cs) for r, cs in by_row.items()})


def merge(target: Coords, other: Coords) -> Coords:
    """Per-row union of two collections."""
    out = target.copy()
    for r in other.rows:
        if r in out.by_row:
            out.by_row[r] = sorted(set(out.by_row[r]) | set(other.by_row[r]))
        else:
            out.by_row[r] = sorted(set(other.by_row[r]))
            out.rows.append(r)
    out.rows.sort()
    return out
