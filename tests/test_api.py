import io
import os
import sys

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from tarpit import RunOptions, find_unbalanced_bracket, run_file, run_string
from tarpit.errors import UnbalancedBracketError, make_unbalanced_error
from tarpit.io import StreamSink, StreamSource


@pytest.mark.parametrize("code, expected", [
    ("", None),
    ("[]", None),
    ("[[]+[]]", None),
    ("][", 0),
    ("[[]", 0),
    ("[]]", 2),
    ("+[", 1),
])
def test_find_unbalanced_bracket(code, expected):
    assert find_unbalanced_bracket(code) == expected


def test_run_string_result():
    out = io.BytesIO()
    result = run_string("+>++.", sink=StreamSink(out))
    assert out.getvalue() == b"\x02"
    assert result.steps == 5
    assert result.pointer == 1
    assert result.cells == [1, 2]


def test_run_string_with_input():
    out = io.BytesIO()
    run_string(",+.", sink=StreamSink(out), source_bytes=StreamSource(io.BytesIO(b"a")))
    assert out.getvalue() == b"b"


def test_check_brackets_before_running():
    out = io.BytesIO()
    with pytest.raises(UnbalancedBracketError) as exc:
        run_string("+.[", options=RunOptions(check_brackets=True), sink=StreamSink(out))
    assert exc.value.position == 2
    assert out.getvalue() == b""


def test_run_file(tmp_path):
    path = tmp_path / "one.b"
    path.write_text("++++++[>++++++++<-]>+.", encoding="utf-8")
    out = io.BytesIO()
    result = run_file(path, sink=StreamSink(out))
    assert out.getvalue() == b"1"
    assert result.pointer == 1


def test_unbalanced_error_message_points_at_bracket():
    err = make_unbalanced_error(source="++\n+[", position=4)
    text = str(err)
    assert "line 2, column 2" in text
    assert "^" in err.context
    assert 'no matching "]"' in text


def test_unbalanced_error_outside_source():
    err = make_unbalanced_error(source="+", position=5)
    assert "offset 5" in str(err)
    assert err.context == ""
