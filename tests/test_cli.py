import io

import pytest

from logical_solver.__main__ import main, split_variables


def run(argv, text):
    stdout, stderr = io.StringIO(), io.StringIO()
    code = main(argv, io.StringIO(text), stdout, stderr)
    return code, stdout.getvalue(), stderr.getvalue()


def test_evaluate():
    code, out, _ = run([], "true and false => false\n")
    assert code == 0
    lines = out.splitlines()
    assert lines[0].startswith("Enter equation> BinaryOp(")
    assert lines[1] == "((true ∧ false) ⇒ false)"
    assert lines[2] == "True"


def test_evaluate_with_values():
    code, out, _ = run(["evaluate", "--set", "A=true", "--set", "B=False"], "A => B\n")
    assert code == 0
    assert out.splitlines()[-1] == "False"


def test_evaluate_unbound_variable():
    code, _, err = run(["evaluate"], "A\n")
    assert code == 1
    assert "Unbound variable 'A'" in err


def test_parse_error():
    code, _, err = run(["evaluate"], "A and )\n")
    assert code == 1
    assert "Unexpected token ')'" in err


def test_truth_table_raw():
    code, out, _ = run(
        ["truth-table", "--raw"], "A, B\nnot (A and B) or (not A and B) <=> B\n"
    )
    assert code == 0
    assert out.splitlines()[-1] == "[False, True, False, False]"


def test_truth_table_uses_formula_variables():
    code, out, _ = run(["truth-table"], "\nA or B\n")
    assert code == 0
    lines = out.splitlines()
    assert lines[0].endswith("(A ∨ B)")
    # header plus four rows
    assert len(lines) == 6


def test_truth_table_collect():
    code, _, err = run(["truth-table", "--raw", "--on-error", "collect"], "A\nA and B\n")
    assert code == 1
    assert "2 of 2 rows failed" in err
    assert "row 0" in err and "row 1" in err


def test_truth_table_limit():
    code, _, err = run(["truth-table", "--max-variables", "1"], "A, B\nA\n")
    assert code == 1
    assert "exceed the limit" in err


def test_bad_value():
    with pytest.raises(SystemExit):
        run(["--set", "A=maybe"], "A\n")


def test_split_variables():
    assert split_variables("A, B,C\n") == ["A", "B", "C"]
    assert split_variables("\n") == []


def test_truth_table_raw_uses_formula_variables():
    code, out, _ = run(["truth-table", "--raw"], "\nA or B\n")
    assert code == 0
    assert out.splitlines()[-1] == "[False, True, True, True]"


def test_too_deep_formula_is_reported():
    code, _, err = run(["evaluate", "--set", "A=true"], " and ".join(["A"] * 5000) + "\n")
    assert code == 1
    assert "levels deep" in err


def test_log_level():
    code, out, _ = run(["--log-level", "debug", "--set", "A=false"], "not A\n")
    assert code == 0
    assert out.splitlines()[-1] == "True"
    with pytest.raises(SystemExit):
        run(["--log-level", "foo"], "A\n")
