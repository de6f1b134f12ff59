from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .errors import make_unbalanced_error
from .interpreter import Interpreter
from .io import ByteSink, ByteSource
from .tokenizer import Tokenizer


@dataclass(frozen=True)
class RunOptions:
    check_brackets: bool = False
    max_steps: Optional[int] = None
    encoding: str = "utf-8"


@dataclass(frozen=True)
class RunResult:
    steps: int
    pointer: int
    cells: List[int]


def find_unbalanced_bracket(source: str) -> Optional[int]:
    """Return the offset of the first unmatched bracket, or None if balanced."""
    stack: List[int] = []
    for pos, ch in enumerate(source):
        if ch == '[':
            stack.append(pos)
        elif ch == ']':
            if not stack:
                return pos
            stack.pop()
    if stack:
        return stack[-1]
    return None


def run_string(source: str, *, options: Optional[RunOptions] = None,
               sink: Optional[ByteSink] = None, source_bytes: Optional[ByteSource] = None) -> RunResult:
    opts = options or RunOptions()
    if opts.check_brackets:
        pos = find_unbalanced_bracket(source)
        if pos is not None:
            raise make_unbalanced_error(source=source, position=pos)

    interpreter = Interpreter(Tokenizer(source), sink=sink, source=source_bytes,
                              max_steps=opts.max_steps)
    tape = interpreter.run()
    return RunResult(steps=interpreter.steps, pointer=tape.pointer_position, cells=tape.snapshot())


def run_file(path: str | Path, *, options: Optional[RunOptions] = None,
             sink: Optional[ByteSink] = None, source_bytes: Optional[ByteSource] = None) -> RunResult:
    opts = options or RunOptions()
    p = Path(path)
    return run_string(p.read_text(encoding=opts.encoding), options=opts,
                      sink=sink, source_bytes=source_bytes)
