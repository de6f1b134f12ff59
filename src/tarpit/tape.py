from __future__ import annotations

from typing import Dict, List, Optional

from .errors import make_invalid_value, make_pointer_error

CELL_SIZE = 256


class Tape:
    """
    Sparse memory tape growing to the right from cell 0.

    Cells are kept in a dict keyed by position. Reading a cell that was never
    written stores a 0 there first, so every cell the pointer has read from
    shows up in ``len(tape)``.
    """

    def __init__(self):
        self._pointer_position = 0
        self._cells: Dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._cells)

    @property
    def pointer_position(self) -> int:
        return self._pointer_position

    @property
    def cell_value(self) -> int:
        return self._cells.setdefault(self._pointer_position, 0)

    @cell_value.setter
    def cell_value(self, value: int) -> None:
        if not self._valid_cell_value(value):
            raise make_invalid_value(value, CELL_SIZE)
        self._cells[self._pointer_position] = value

    def increment_cell_value(self) -> None:
        self.cell_value = (self.cell_value + 1) % CELL_SIZE

    def decrement_cell_value(self) -> None:
        self.cell_value = (self.cell_value - 1) % CELL_SIZE

    def increment_pointer(self) -> None:
        self._pointer_position += 1

    def decrement_pointer(self) -> None:
        if self._pointer_position <= 0:
            raise make_pointer_error(self._pointer_position)
        self._pointer_position -= 1

    def snapshot(self, start: int = 0, stop: Optional[int] = None) -> List[int]:
        """Return cell values for ``start..stop-1`` without materializing cells.

        ``stop`` defaults to one past the highest materialized cell.
        """
        if stop is None:
            stop = max(self._cells, default=-1) + 1
        return [self._cells.get(pos, 0) for pos in range(start, stop)]

    @staticmethod
    def _valid_cell_value(value) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < CELL_SIZE
