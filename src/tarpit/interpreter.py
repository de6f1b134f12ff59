from __future__ import annotations

import logging
from typing import Optional

from .errors import make_step_limit_error
from .io import ByteSink, ByteSource, open_input, open_output
from .tape import Tape
from .tokenizer import END_OF_PROGRAM, Tokenizer

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Dispatch loop: fetches instructions from the tokenizer and applies them to
    the tape and the I/O collaborators.

    Characters other than the eight instructions are ignored. The run ends
    when the tokenizer reports END_OF_PROGRAM; every error propagates.
    """

    def __init__(self, tokenizer: Tokenizer, tape: Optional[Tape] = None,
                 sink: Optional[ByteSink] = None, source: Optional[ByteSource] = None,
                 max_steps: Optional[int] = None):
        self.tokenizer = tokenizer
        self.tape = tape if tape is not None else Tape()
        self.sink = sink
        self.source = source
        self.max_steps = max_steps
        self.steps = 0

    def run(self) -> Tape:
        tape = self.tape
        logger.debug("run started, %d program characters", len(self.tokenizer.scanner))

        while True:
            instruction = self.tokenizer.next(tape.cell_value)
            if instruction is END_OF_PROGRAM:
                break

            self.steps += 1
            if self.max_steps is not None and self.steps > self.max_steps:
                raise make_step_limit_error(self.max_steps)

            if instruction == '+':
                tape.increment_cell_value()
            elif instruction == '-':
                tape.decrement_cell_value()
            elif instruction == '>':
                tape.increment_pointer()
            elif instruction == '<':
                tape.decrement_pointer()
            elif instruction == '.':
                self._output().write_byte(tape.cell_value)
            elif instruction == ',':
                self._read_into_cell()

        logger.debug("run finished after %d steps, pointer at %d",
                     self.steps, tape.pointer_position)
        return tape

    def _read_into_cell(self) -> None:
        # A zero byte means nothing arrived yet; ask again.
        source = self._input()
        while True:
            value = source.read_byte()
            if value is None:
                logger.debug("input exhausted, cell %d left unchanged", self.tape.pointer_position)
                return
            if value == 0:
                logger.debug("ignoring null input byte")
                continue
            self.tape.cell_value = value
            return

    def _output(self) -> ByteSink:
        if self.sink is None:
            self.sink = open_output()
        return self.sink

    def _input(self) -> ByteSource:
        if self.source is None:
            self.source = open_input()
        return self.source
