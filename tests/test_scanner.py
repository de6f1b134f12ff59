import os
import sys

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from tarpit.errors import EndOfProgram, UnbalancedBracketError
from tarpit.scanner import Scanner

NESTED = "[+[-[>]<]+]"


def test_consume_and_end():
    scanner = Scanner("+-")
    assert scanner.current_char() == '+'
    scanner.consume()
    assert scanner.current_char() == '-'
    scanner.consume()
    assert scanner.at_end
    with pytest.raises(EndOfProgram):
        scanner.validate_index()


def test_validate_index_inside_program():
    scanner = Scanner("+")
    scanner.validate_index()
    assert scanner.index == 0


@pytest.mark.parametrize("start, expected", [(0, 10), (2, 8), (4, 6)])
def test_jump_forward_lands_on_matching_bracket(start, expected):
    scanner = Scanner(NESTED)
    scanner.index = start
    scanner.jump_forward()
    assert scanner.index == expected
    assert scanner.current_char() == ']'


@pytest.mark.parametrize("start, expected", [(10, 0), (8, 2), (6, 4)])
def test_jump_back_lands_on_matching_bracket(start, expected):
    scanner = Scanner(NESTED)
    scanner.index = start
    scanner.jump_back()
    assert scanner.index == expected
    assert scanner.current_char() == '['


def test_jumps_skip_sibling_loops():
    scanner = Scanner("[[][]]")
    scanner.jump_forward()
    assert scanner.index == 5
    scanner.jump_back()
    assert scanner.index == 0


def test_jump_forward_off_the_end():
    scanner = Scanner("[+")
    with pytest.raises(UnbalancedBracketError) as exc:
        scanner.jump_forward()
    assert exc.value.position == 0
    assert scanner.index == 0


def test_jump_back_off_the_start():
    scanner = Scanner("+]")
    scanner.index = 1
    with pytest.raises(UnbalancedBracketError) as exc:
        scanner.jump_back()
    assert exc.value.position == 1
    assert scanner.index == 1
