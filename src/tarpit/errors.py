from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


def _locate(source: str, position: int) -> Tuple[int, int]:
    # 1-based line, 0-based column of a character offset
    before = source[:position]
    line_no = before.count('\n') + 1
    column = position - (before.rfind('\n') + 1)
    return line_no, column


def _build_context(lines: List[str], line_no_1: int, column: int, *, context: int = 1) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"       | {' ' * column}^")
    return "\n".join(out)


def _hint_for(source: str, position: int) -> Optional[str]:
    if not 0 <= position < len(source):
        return None
    if source[position] == '[':
        return 'This "[" has no matching "]". Add the missing "]" or remove the "[".'
    if source[position] == ']':
        return 'This "]" has no matching "[". Add the missing "[" or remove the "]".'
    return None


class EndOfProgram(Exception):
    """Raised by the scanner when its cursor has run past the last instruction."""


@dataclass
class TarpitError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class PointerBoundaryError(TarpitError):
    position: int = 0


@dataclass
class InvalidValue(TarpitError):
    value: object = None


@dataclass
class UnbalancedBracketError(TarpitError):
    position: int = 0
    context: str = ''


@dataclass
class StepLimitExceeded(TarpitError):
    steps: int = 0


def make_pointer_error(position: int) -> PointerBoundaryError:
    return PointerBoundaryError(
        message=f"PointerBoundaryError: cannot move the pointer left of cell {position}",
        position=position,
    )


def make_invalid_value(value: object, cell_size: int) -> InvalidValue:
    return InvalidValue(
        message=f"InvalidValue: {value!r} is not a cell value (expected an int in 0..{cell_size - 1})",
        value=value,
    )


def make_unbalanced_error(*, source: str, position: int) -> UnbalancedBracketError:
    """Build an UnbalancedBracketError pointing at ``position`` in ``source``.

    ``position`` may fall outside the source when a jump ran off either end;
    the message then only names the offset.
    """
    if 0 <= position < len(source):
        line_no, column = _locate(source, position)
        ctx = _build_context(source.split('\n'), line_no, column)
        where = f"line {line_no}, column {column + 1}"
    else:
        ctx = ''
        where = f"offset {position}"

    hint = _hint_for(source, position)
    ctx_block = f"\n{ctx}" if ctx else ""
    hint_block = f"\nHint: {hint}" if hint else ""
    return UnbalancedBracketError(
        message=f"UnbalancedBracketError: unmatched bracket at {where}{ctx_block}{hint_block}",
        position=position,
        context=ctx,
    )


def make_step_limit_error(steps: int) -> StepLimitExceeded:
    return StepLimitExceeded(
        message=f"StepLimitExceeded: program did not finish within {steps} steps",
        steps=steps,
    )
