from __future__ import annotations

import io
from textwrap import dedent

import pytest

from lox_ref.runner import Interpreter, report_runtime_error
from lox_ref.token_types import TT, Tok
from lox_ref.types import LoxRuntimeError
from tests.support.harness import (
    LoxArithmeticError,
    LoxTypeError,
    LoxUndefinedVariable,
    parse_program,
    run_program,
    run_runtime_case,
)

SCENARIOS = [
    pytest.param(
        'print "a" + 1 / 0;',
        [],
        LoxArithmeticError,
        id="division-error-suppresses-print",
    ),
    pytest.param(
        dedent(
            """\
            print "before";
            print -"oops";
            print "after";
        """
        ),
        ["before"],
        LoxTypeError,
        id="error-stops-remaining-statements",
    ),
    pytest.param(
        dedent(
            """\
            var x = 1;
            {
              print x;
              x = nil + 1;
              print "unreachable";
            }
            print "also unreachable";
        """
        ),
        ["1"],
        LoxTypeError,
        id="error-inside-block-unwinds",
    ),
    pytest.param(
        "print true + true;",
        [],
        LoxTypeError,
        id="plus-bools",
    ),
    pytest.param(
        "print 1 < nil;",
        [],
        LoxTypeError,
        id="compare-with-nil",
    ),
    pytest.param(
        'print "before"; print "ab" * 1' + "0" * 300 + '; print "after";',
        ["before"],
        LoxArithmeticError,
        id="oversized-repeat-is-reported",
    ),
    pytest.param(
        "var y = missing;",
        [],
        LoxUndefinedVariable,
        id="initializer-undefined",
    ),
]


@pytest.mark.parametrize("source, expectation, expected_exc", SCENARIOS)
def test_error_handling(source: str, expectation, expected_exc) -> None:
    run_runtime_case(source, expectation, expected_exc)


@pytest.mark.parametrize(
    "source, message, line",
    [
        pytest.param("print -nil;", "Operand must be a number.", 1, id="unary-operand"),
        pytest.param('print 1 - "a";', "Operands must be numbers.", 1, id="binary-operands"),
        pytest.param("print nil + 1;", "Operands must be numbers or strings.", 1, id="plus-operands"),
        pytest.param("\n\nprint 4 / 0;", "Division by zero.", 3, id="division-line"),
        pytest.param("\nprint nope;", "Undefined variable 'nope'.", 2, id="undefined-line"),
    ],
)
def test_error_message_and_line(source: str, message: str, line: int) -> None:
    result = run_program(source)

    assert len(result.errors) == 1
    err = result.errors[0]
    assert err.message == message
    assert err.token.line == line


def test_error_carries_operator_token() -> None:
    result = run_program('print 2 * "x" * nil;')

    err = result.errors[0]
    assert isinstance(err, LoxTypeError)
    assert err.token.type == TT.STAR
    assert err.token.lexeme == "*"


def test_report_runtime_error_format() -> None:
    stream = io.StringIO()
    err = LoxRuntimeError(Tok(TT.SLASH, "/", None, 12), "Division by zero.")

    report_runtime_error(err, stream)

    assert stream.getvalue() == "Division by zero.\n[line 12]\n"


def test_report_runtime_error_with_py_trace(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOX_DEBUG_PY_TRACE", "1")
    result = run_program("print -nil;")
    stream = io.StringIO()

    report_runtime_error(result.errors[0], stream)

    text = stream.getvalue()
    assert text.startswith("Operand must be a number.\n[line 1]\n")
    assert "Traceback" in text
    assert "LoxTypeError" in text


def test_report_runtime_error_defaults_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    err = LoxRuntimeError(Tok(TT.MINUS, "-", None, 4), "Operand must be a number.")

    report_runtime_error(err)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Operand must be a number.\n[line 4]\n"


def test_error_str_includes_line() -> None:
    err = LoxRuntimeError(Tok(TT.MINUS, "-", None, 9), "Operand must be a number.")
    assert str(err) == "Operand must be a number. (line 9)"


def test_oversized_repeat_sets_error_flag() -> None:
    interp = Interpreter(out=io.StringIO(), reporter=lambda err: None)

    ok = interp.interpret(parse_program('var s = "ab" * 1000000000000;'))

    assert ok is False
    assert interp.had_runtime_error is True
    assert "s" not in interp.globals.values
