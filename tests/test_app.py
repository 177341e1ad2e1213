"""Tests for the console, menu and interactive application."""
import io

import pytest

from nmp import DimensionMismatch, create, format_matrix
from nmp.__main__ import main
from nmp.app import Application
from nmp.console import Console
from nmp.menu import Menu


def run_app(text, verbose=False):
    out = io.StringIO()
    Application(stdin=io.StringIO(text), stdout=out, verbose=verbose).run()
    return out.getvalue()


# ============================================================
# Rendering
# ============================================================

def test_format_matrix_2x3():
    text = format_matrix(create(2, 3, [1, 2, 3, 4, 5, 6]))
    assert text == "     1.00      2.00      3.00\n     4.00      5.00      6.00\n"
    assert text.splitlines() == ["     1.00      2.00      3.00",
                                 "     4.00      5.00      6.00"]


def test_format_matrix_rounding_and_sign():
    text = format_matrix(create(1, 2, [-2.5, 1234.5678]))
    assert text == "    -2.50   1234.57\n"


def test_format_matrix_no_columns():
    assert format_matrix(create(0, 0, [])) == ""
    assert format_matrix(create(3, 0, [])) == ""


def test_str_uses_console_format():
    m = create(1, 1, [3])
    assert str(m) == "     3.00\n"


# ============================================================
# Console input
# ============================================================

def test_console_tokens_span_lines():
    console = Console(io.StringIO("1 2\n\n  3\n4.5\n"), io.StringIO())
    assert [console.read_int(), console.read_int(), console.read_int()] == [1, 2, 3]
    assert console.read_float() == 4.5
    with pytest.raises(EOFError):
        console.next_token()


def test_console_bad_token():
    console = Console(io.StringIO("abc\n"), io.StringIO())
    with pytest.raises(ValueError, match="abc"):
        console.read_float()


def test_console_read_matrix():
    out = io.StringIO()
    console = Console(io.StringIO("2 3\n1 2 3\n4 5 6\n"), out)
    m = console.read_matrix("the")
    assert m == create(2, 3, [1, 2, 3, 4, 5, 6])
    assert out.getvalue() == "Enter size (rows and cols) of the matrix:\nEnter the matrix:\n"


def test_console_read_matrix_consumes_all_elements_on_bad_token():
    console = Console(io.StringIO("2 2\n1 x\n3 4\n9\n"), io.StringIO())
    with pytest.raises(ValueError, match="x"):
        console.read_matrix("the")
    assert console.read_int() == 9


def test_console_negative_size_fails_before_element_prompt():
    out = io.StringIO()
    console = Console(io.StringIO("-1 2\n"), out)
    with pytest.raises(DimensionMismatch):
        console.read_matrix("the")
    assert "Enter the matrix:" not in out.getvalue()


# ============================================================
# Menu
# ============================================================

def test_menu_dispatch_and_exit():
    calls = []
    out = io.StringIO()
    menu = Menu("Test").add("First", lambda: calls.append(1)).add("Second", lambda: calls.append(2))
    menu.run(Console(io.StringIO("2\n1\n0\n"), out))
    assert calls == [2, 1]
    assert "1. First\n2. Second\n0. Exit\nYour choice: " in out.getvalue()


def test_menu_one_time_submenu():
    calls = []
    out = io.StringIO()
    sub = Menu("Sub").one_time().add("Pick", lambda: calls.append("sub"))
    menu = Menu("Top").add("Open", sub)
    menu.run(Console(io.StringIO("1\n1\n0\n"), out))
    assert calls == ["sub"]
    assert "0. Back" in out.getvalue()


def test_menu_unknown_and_invalid_choice():
    out = io.StringIO()
    Menu("Top").add("Noop", lambda: None).run(Console(io.StringIO("7\nx y\n0\n"), out))
    assert "Unknown option: 7" in out.getvalue()
    assert "Invalid choice" in out.getvalue()


# ============================================================
# Application
# ============================================================

def test_app_add():
    out = run_app("1\n2 2\n1 2\n3 4\n2 2\n1 1\n1 1\n0\n")
    assert "The result is:\n     2.00      3.00\n     4.00      5.00\n" in out


def test_app_multiply_by_constant():
    out = run_app("2\n1 2\n1 2\n1.5\n0\n")
    assert "Enter constant:" in out
    assert "The result is:\n     1.50      3.00\n" in out


def test_app_multiply_matrices():
    out = run_app("3\n1 2\n1 2\n2 1\n3\n4\n0\n")
    assert "The result is:\n    11.00\n" in out


def test_app_transpose_submenu():
    out = run_app("4\n1\n2 2\n1 2 3 4\n0\n")
    assert "1. Main diagonal\n2. Side diagonal\n3. Vertical line\n4. Horizontal line\n" in out
    assert "The result is:\n     1.00      3.00\n     2.00      4.00\n" in out


def test_app_determinant():
    out = run_app("5\n2 2\n1 2 3 4\n0\n")
    assert "The result is:\n-2.0\n" in out


def test_app_inverse():
    out = run_app("6\n2 2\n4 7 2 6\n0\n")
    assert "The result is:\n     0.60     -0.70\n    -0.20      0.40\n" in out


def test_app_inverse_singular():
    out = run_app("6\n2 2\n0 0 0 0\n0\n")
    assert "This matrix doesn't have an inverse." in out
    assert "The result is:" not in out


def test_app_reports_engine_errors():
    out = run_app("5\n2 3\n1 2 3 4 5 6\n1\n1 1\n1\n2 2\n1 2 3 4\n0\n")
    assert out.count("The operation cannot be performed.") == 2


def test_app_reports_invalid_input():
    out = run_app("5\n2 2\n1 x 3 4\n0\n")
    assert "Invalid input: expected a number, got 'x'" in out


def test_app_invalid_element_spanning_lines_returns_to_menu():
    out = run_app("5\n2 2\n1 x\n3 4\n0\n")
    assert "Invalid input: expected a number, got 'x'" in out
    # the remaining elements are not taken as menu choices
    assert out.count("Enter size") == 1
    assert "Enter first matrix:" not in out
    assert out.count("Your choice: ") == 2


def test_app_negative_size():
    out = run_app("5\n-1 2\n0\n")
    assert "The operation cannot be performed." in out
    assert "Enter the matrix:" not in out


def test_app_menu_wording():
    out = run_app("4\n0\n0\n")
    assert "1. Add matrices\n2. Multiply matrix to a constant\n3. Multiply matrices\n" in out
    assert "Transpose Matrix\n1. Main diagonal\n" in out


def test_app_blank_line_after_matrix_result_only():
    out = run_app("1\n1 1\n2\n1 1\n3\n5\n1 1\n7\n0\n")
    assert "The result is:\n     5.00\n\nNumeric Matrix Processor" in out
    assert "The result is:\n7.0\nNumeric Matrix Processor" in out


def test_app_stops_at_end_of_input():
    assert "Numeric Matrix Processor" in run_app("")
    assert "Numeric Matrix Processor" in run_app("5\n2 2\n1 2\n")


def test_app_verbose():
    out = run_app("5\n2 2\n1 2 3 4\n0\n", verbose=True)
    assert "  [NMP] determinant: 2 x 2," in out


def test_main_entry_point(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n1 1\n7\n0\n"))
    assert main([]) == 0
    assert "The result is:\n7.0\n" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
