from __future__ import annotations

import logging
from typing import Iterable, Tuple

from .errors import EndOfProgram, make_unbalanced_error

logger = logging.getLogger(__name__)


class Scanner:
    """
    Cursor over the raw program characters.

    The cursor only moves forward by one (``consume``) or across a balanced
    bracket pair (``jump_forward`` / ``jump_back``). ``index == len(chars)``
    marks the end of the program.
    """

    def __init__(self, chars: Iterable[str]):
        self.chars: Tuple[str, ...] = tuple(chars)
        self.index = 0

    def __len__(self) -> int:
        return len(self.chars)

    @property
    def at_end(self) -> bool:
        return self.index == len(self.chars)

    def current_char(self) -> str:
        return self.chars[self.index]

    def validate_index(self) -> None:
        if self.at_end:
            raise EndOfProgram()

    def consume(self) -> None:
        self.index += 1

    def jump_forward(self) -> None:
        self._jump('[', ']', 1)

    def jump_back(self) -> None:
        self._jump(']', '[', -1)

    def _jump(self, opening: str, closing: str, step: int) -> None:
        # The bracket under the cursor counts as the first level.
        start = self.index
        counter = 1
        while counter != 0:
            self.index += step
            if not 0 <= self.index < len(self.chars):
                self.index = start
                raise make_unbalanced_error(source=''.join(self.chars), position=start)
            ch = self.chars[self.index]
            if ch == opening:
                counter += 1
            elif ch == closing:
                counter -= 1
        logger.debug("jump %d -> %d", start, self.index)
