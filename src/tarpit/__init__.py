from .api import RunOptions, RunResult, find_unbalanced_bracket, run_file, run_string
from .errors import (
    InvalidValue,
    PointerBoundaryError,
    StepLimitExceeded,
    TarpitError,
    UnbalancedBracketError,
)
from .interpreter import Interpreter
from .scanner import Scanner
from .tape import CELL_SIZE, Tape
from .tokenizer import END_OF_PROGRAM, Tokenizer

__all__ = [
    'CELL_SIZE',
    'END_OF_PROGRAM',
    'Interpreter',
    'InvalidValue',
    'PointerBoundaryError',
    'RunOptions',
    'RunResult',
    'Scanner',
    'StepLimitExceeded',
    'Tape',
    'TarpitError',
    'Tokenizer',
    'UnbalancedBracketError',
    'find_unbalanced_bracket',
    'run_file',
    'run_string',
]
