import pytest

import badarg.deployment as d
from badarg.constraints import ensure, fan_out, is_blank, valid_name
from badarg.errors import InvalidArgumentError
from badarg.report import FailureReport


def test_ensure_true_condition():
    ensure(True, FailureReport(expectation="x", actual="y"))


def test_ensure_false_condition_raises_report():
    report = FailureReport(expectation="non-null", actual="null")

    with pytest.raises(InvalidArgumentError, match="Bad arg: expected=non-null;actual=null") as exc:
        ensure(False, report)

    assert exc.value.report is report


def test_ensure_builds_report_lazily():
    calls = []

    def factory():
        calls.append(1)
        return FailureReport(expectation="x", actual="y")

    ensure(True, factory)
    assert calls == []

    with pytest.raises(InvalidArgumentError):
        ensure(False, factory)

    assert calls == [1]


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        ensure(0, FailureReport(expectation="x", actual="y"))


def test_ensure_with_falsy_values():
    report = FailureReport(expectation="x", actual="y")

    ensure(1, report)
    ensure("non-empty", report)
    ensure([1], report)

    for falsy in (0, "", [], {}):
        with pytest.raises(InvalidArgumentError):
            ensure(falsy, report)


def test_valid_name():
    assert valid_name("arg")
    assert valid_name(" arg ")
    assert not valid_name("")
    assert not valid_name("   ")
    assert not valid_name("\t\n")
    assert not valid_name(None)
    assert not valid_name(42)


def test_fan_out_stops_at_first_failure():
    seen = []

    def check(x):
        seen.append(x)
        ensure(x != "bad", FailureReport(expectation="good", actual=x))

    with pytest.raises(InvalidArgumentError, match="actual=bad"):
        fan_out(check, "a", ("b", "bad", "c"))

    assert seen == ["a", "b", "bad"]


def test_fan_out_empty_rest():
    seen = []

    fan_out(seen.append, 1, ())

    assert seen == [1]


def test_trace_logs_failures(monkeypatch, caplog):
    monkeypatch.setattr(d, "TRACE", True)

    with caplog.at_level("DEBUG", logger="badarg"):
        with pytest.raises(InvalidArgumentError):
            ensure(False, FailureReport(expectation="x", actual="y"))

    assert "Bad arg: expected=x;actual=y" in caplog.text


def test_no_logging_by_default(monkeypatch, caplog):
    monkeypatch.setattr(d, "TRACE", False)

    with caplog.at_level("DEBUG", logger="badarg"):
        with pytest.raises(InvalidArgumentError):
            ensure(False, FailureReport(expectation="x", actual="y"))

    assert caplog.records == []


def test_valid_name_no_break_space():
    assert valid_name("\u00a0")
    assert valid_name("\u202f")
    assert not valid_name("\u2003")


def test_is_blank():
    assert is_blank("")
    assert is_blank(" \t\r\n")
    assert not is_blank("\u2007")
    assert not is_blank(" x ")
