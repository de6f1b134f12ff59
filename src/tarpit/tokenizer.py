from __future__ import annotations

from typing import Union

from .errors import EndOfProgram
from .scanner import Scanner


class _EndOfProgramType:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'END_OF_PROGRAM'

    def __bool__(self) -> bool:
        return False


END_OF_PROGRAM = _EndOfProgramType()

Step = Union[str, _EndOfProgramType]


class Tokenizer:
    """
    Program counter for the interpreter.

    ``next`` resolves ``[`` and ``]`` against the current cell value and hands
    back the instruction that follows them, or ``END_OF_PROGRAM`` once the
    cursor has run out of characters.
    """

    def __init__(self, source_text: str):
        self.scanner = Scanner(source_text)

    def next(self, cell_value: int) -> Step:
        try:
            return self._next(cell_value)
        except EndOfProgram:
            return END_OF_PROGRAM

    def _next(self, cell_value: int) -> str:
        scanner = self.scanner
        scanner.validate_index()

        element = scanner.current_char()

        if element == '[':
            if cell_value == 0:
                scanner.jump_forward()
            scanner.consume()
            scanner.validate_index()
            element = scanner.current_char()
        elif element == ']':
            if cell_value == 0:
                # Walks over a whole run of adjacent "]" at once.
                while element == ']':
                    scanner.consume()
                    scanner.validate_index()
                    element = scanner.current_char()
            else:
                scanner.jump_back()
                scanner.consume()
                scanner.validate_index()
                element = scanner.current_char()

        scanner.consume()
        return element
