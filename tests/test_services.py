"""Tests for the input provider, result reporter, and batch runner."""

import io

import pytest
from structlog.testing import capture_logs

from pwcheck.exceptions import InputSourceError, OutputSinkError
from pwcheck.services.batch import run_batch
from pwcheck.services.input_provider import InputProvider
from pwcheck.services.result_reporter import ResultReporter, format_diagnostics, format_result
from pwcheck.validators import PolicyEvaluator


class _BrokenSink:
    """Text sink whose writes fail for selected lines."""

    def __init__(self, fail_on):
        self.fail_on = set(fail_on)
        self.calls = 0
        self.lines = []

    def write(self, text):
        self.calls += 1
        if self.calls in self.fail_on:
            raise OSError("disk full")
        self.lines.append(text)
        return len(text)

    def close(self):
        pass


# ── InputProvider ──

def test_provider_stops_at_sentinel():
    provider = InputProvider(io.StringIO("a\ntv\nend\nbanana\n"))
    assert list(provider) == ["a", "tv"]
    assert provider.sentinel_found
    assert provider.lines_read == 3


def test_provider_strips_only_line_terminators():
    provider = InputProvider(io.StringIO("a\r\n b \nlast"))
    assert list(provider) == ["a", " b ", "last"]
    assert not provider.sentinel_found


@pytest.mark.parametrize("line", ["END", " end", "end ", "ends"])
def test_sentinel_is_exact_match(line):
    provider = InputProvider(io.StringIO(f"{line}\nend\n"))
    assert list(provider) == [line]
    assert provider.sentinel_found


def test_provider_yields_empty_lines():
    assert list(InputProvider(io.StringIO("\n\nend\n"))) == ["", ""]


def test_provider_open_missing_file(tmp_path):
    with pytest.raises(InputSourceError):
        InputProvider.open(tmp_path / "missing.txt")


def test_provider_open_handles_crlf_file(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"a\r\ntv\r\nend\r\n")
    with InputProvider.open(path) as provider:
        assert list(provider) == ["a", "tv"]
        assert provider.sentinel_found


# ── ResultReporter ──

def test_format_result():
    assert format_result("banana", True) == "<banana> is acceptable.\r\n"
    assert format_result("rhythm", False) == "<rhythm> is not acceptable.\r\n"


def test_format_diagnostics():
    verdict = PolicyEvaluator().diagnose("tv")
    assert format_diagnostics(verdict) == (
        "<tv> checks: length=pass approved_characters=pass vowel_present=fail "
        "no_disallowed_repeat=pass no_forbidden_run=pass\r\n"
    )


def test_reporter_writes_verdict_lines():
    sink = io.StringIO()
    reporter = ResultReporter(sink)
    evaluator = PolicyEvaluator()

    assert reporter.report(evaluator.evaluate("a"))
    assert reporter.report(evaluator.evaluate("tv"))

    assert sink.getvalue() == "<a> is acceptable.\r\n<tv> is not acceptable.\r\n"
    assert reporter.written == 2


def test_reporter_write_failure_is_logged_not_raised():
    sink = _BrokenSink(fail_on={1})
    reporter = ResultReporter(sink)
    evaluator = PolicyEvaluator()

    with capture_logs() as logs:
        assert not reporter.report(evaluator.evaluate("a"))
        assert reporter.report(evaluator.evaluate("tv"))

    assert reporter.write_failures == 1
    assert sink.lines == ["<tv> is not acceptable.\r\n"]
    failures = [e for e in logs if e["event"] == "result_write_failed"]
    assert len(failures) == 1
    assert failures[0]["log_level"] == "error"
    assert failures[0]["line"] == 1


def test_reporter_create_in_missing_directory(tmp_path):
    with pytest.raises(OutputSinkError):
        ResultReporter.create(tmp_path / "no_such_dir" / "out.txt")


# ── run_batch ──

def test_batch_reports_in_order():
    provider = InputProvider(io.StringIO("a\ntv\nzoggax\nbanana\nend\nee\n"))
    sink = io.StringIO()

    summary = run_batch(provider, PolicyEvaluator(), ResultReporter(sink))

    assert sink.getvalue() == (
        "<a> is acceptable.\r\n"
        "<tv> is not acceptable.\r\n"
        "<zoggax> is not acceptable.\r\n"
        "<banana> is acceptable.\r\n"
    )
    assert summary.evaluated == 4
    assert summary.accepted == 2
    assert summary.rejected == 2
    assert summary.sentinel_found
    assert summary.write_failures == 0
    assert summary.duration_ms >= 0


def test_batch_diagnostic_mode_adds_check_lines():
    provider = InputProvider(io.StringIO("eee\nend\n"))
    sink = io.StringIO()

    summary = run_batch(provider, PolicyEvaluator(), ResultReporter(sink), diagnostic=True)

    assert sink.getvalue() == (
        "<eee> is not acceptable.\r\n"
        "<eee> checks: length=pass approved_characters=pass vowel_present=pass "
        "no_disallowed_repeat=pass no_forbidden_run=fail\r\n"
    )
    assert summary.rejected == 1


def test_batch_warns_when_sentinel_missing():
    provider = InputProvider(io.StringIO("a\nbanana\n"))

    with capture_logs() as logs:
        summary = run_batch(provider, PolicyEvaluator(), ResultReporter(io.StringIO()))

    assert not summary.sentinel_found
    assert summary.evaluated == 2
    warnings = [e for e in logs if e["event"] == "end_of_input_not_found"]
    assert len(warnings) == 1
    assert warnings[0]["log_level"] == "warning"
    assert warnings[0]["lines_read"] == 2


def test_batch_no_warning_when_sentinel_found():
    provider = InputProvider(io.StringIO("a\nend\n"))

    with capture_logs() as logs:
        run_batch(provider, PolicyEvaluator(), ResultReporter(io.StringIO()))

    assert [e["event"] for e in logs if e["log_level"] == "warning"] == []
    assert any(e["event"] == "batch_complete" for e in logs)


def test_batch_continues_after_write_failure():
    provider = InputProvider(io.StringIO("a\ntv\nbanana\nend\n"))
    sink = _BrokenSink(fail_on={2})

    summary = run_batch(provider, PolicyEvaluator(), ResultReporter(sink))

    assert summary.evaluated == 3
    assert summary.write_failures == 1
    assert sink.lines == ["<a> is acceptable.\r\n", "<banana> is acceptable.\r\n"]


def test_lone_carriage_return_stays_in_candidate():
    provider = InputProvider(io.StringIO("ab\rcd\nend\n"))
    assert list(provider) == ["ab\rcd"]
    assert provider.sentinel_found


def test_file_with_lone_carriage_return_gives_one_verdict(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"ab\rcd\r\nend\r\n")
    sink = io.StringIO()

    with InputProvider.open(path) as provider:
        summary = run_batch(provider, PolicyEvaluator(), ResultReporter(sink))

    assert sink.getvalue() == "<ab\rcd> is not acceptable.\r\n"
    assert summary.evaluated == 1


def test_batch_write_failures_come_from_reporter():
    provider = InputProvider(io.StringIO("a\ntv\nend\n"))
    reporter = ResultReporter(_BrokenSink(fail_on={1, 2}))

    summary = run_batch(provider, PolicyEvaluator(), reporter)

    assert summary.write_failures == reporter.write_failures == 2
