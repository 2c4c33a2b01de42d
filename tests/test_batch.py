"""Tests for multi-case runs and reporting."""

import json
import logging
from polysecret.batch import CaseResult, Reporter, load_cases, run_cases
from polysecret.errors import (
    DigitOutOfRange, DivisionByZero, InvalidTestCase, NonIntegralResult,
)


GOOD = {"keys": {"k": 2}, "1": {"base": 10, "value": "10"},
        "2": {"base": 10, "value": "12"}}
BAD_DIGIT = {"keys": {"k": 1}, "1": {"base": 2, "value": "12"}}
DUP_X = {"keys": {"k": 2}, "5": {"base": 10, "value": "1"},
         "05": {"base": 10, "value": "1"}}

# 10**5000 + 1: past the interpreter's default int-to-str digit limit
HUGE_DIGITS = "1" + "0" * 4999 + "1"
HUGE_SECRET = {"keys": {"k": 1}, "1": {"base": 10, "value": HUGE_DIGITS}}
# line through (1, 0) and (3, 10**5000 + 1): f(0) = -(10**5000 + 1)/2
HUGE_NON_INTEGRAL = {"keys": {"k": 2}, "1": {"base": 10, "value": "0"},
                     "3": {"base": 10, "value": HUGE_DIGITS}}


class TestLoadCases:

    def test_single_object(self):
        assert load_cases(GOOD) == [GOOD]

    def test_list(self):
        assert load_cases([GOOD, DUP_X]) == [GOOD, DUP_X]


class TestRunCases:
    """Per-case isolation: one failure never aborts siblings."""

    def test_all_succeed(self):
        results = run_cases([GOOD, GOOD])
        assert [r.secret for r in results] == [8, 8]
        assert all(r.ok for r in results)

    def test_failure_does_not_abort(self):
        results = run_cases([BAD_DIGIT, GOOD, DUP_X, GOOD])
        assert [r.index for r in results] == [0, 1, 2, 3]
        assert isinstance(results[0].error, DigitOutOfRange)
        assert results[1].secret == 8
        assert isinstance(results[2].error, DivisionByZero)
        assert results[3].secret == 8

    def test_malformed_case_captured(self):
        results = run_cases(["not a case", GOOD])
        assert isinstance(results[0].error, InvalidTestCase)
        assert results[0].secret is None
        assert results[1].ok

    def test_failures_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="polysecret.batch"):
            run_cases([GOOD, BAD_DIGIT])
        assert any("case 1 failed" in r.getMessage() for r in caplog.records)


class TestReporter:

    def test_lines(self):
        reporter = Reporter(run_cases([GOOD, BAD_DIGIT]))
        lines = reporter.lines()
        assert lines[0] == "8"
        assert lines[1].startswith("error: Digit '2'")

    def test_summary(self):
        reporter = Reporter(run_cases([GOOD, BAD_DIGIT, GOOD]))
        assert reporter.summary() == {'total': 3, 'succeeded': 2, 'failed': 1}

    def test_to_dict(self):
        entries = Reporter(run_cases([GOOD, DUP_X])).to_dict()
        assert entries[0] == {'index': 0, 'ok': True, 'secret': '8'}
        assert entries[1]['ok'] is False
        assert entries[1]['error'] == 'DivisionByZero'

    def test_json_keeps_big_secrets_exact(self):
        big = 2**300 + 1
        reporter = Reporter([CaseResult(0, secret=big)])
        data = json.loads(reporter.to_json())
        assert int(data['results'][0]['secret']) == big
        assert data['summary']['succeeded'] == 1


class TestHugeValues:
    """Secrets and fractions beyond 4300 digits report exactly."""

    def test_huge_secret_lines_and_dict(self):
        reporter = Reporter(run_cases([HUGE_SECRET]))
        assert reporter.lines() == [HUGE_DIGITS]
        assert reporter.to_dict()[0]['secret'] == HUGE_DIGITS

    def test_huge_secret_json(self):
        data = json.loads(Reporter(run_cases([HUGE_SECRET])).to_json())
        assert data['results'][0]['secret'] == HUGE_DIGITS

    def test_huge_non_integral_does_not_abort_siblings(self):
        results = run_cases([HUGE_NON_INTEGRAL, GOOD])
        assert isinstance(results[0].error, NonIntegralResult)
        assert results[0].error.denominator == 2
        assert results[1].secret == 8
        lines = Reporter(results).lines()
        assert lines[0] == f"error: Result is not an integer: -{HUGE_DIGITS}/2"
        assert lines[1] == "8"
