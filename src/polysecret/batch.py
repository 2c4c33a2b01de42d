"""Run many cases with per-case error isolation, and report the results."""

import json
import logging
from dataclasses import dataclass
from typing import Optional

from polysecret.errors import PolysecretError
from polysecret.numtext import to_decimal
from polysecret.testcase import compute_constant_term

logger = logging.getLogger(__name__)


@dataclass
class CaseResult:
    index: int
    secret: Optional[int] = None
    error: Optional[PolysecretError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_cases(data) -> list:
    """Normalize decoded JSON to a list of case mappings.

    A single object is one case; a list is many.
    """
    if isinstance(data, list):
        return data
    return [data]


def run_cases(cases: list) -> list:
    """Reconstruct every case in order.

    A PolysecretError in one case is recorded on its CaseResult and the
    remaining cases still run. Anything else propagates.
    """
    results = []
    for index, case in enumerate(cases):
        try:
            secret = compute_constant_term(case)
        except PolysecretError as e:
            logger.warning("case %d failed: %s", index, e)
            results.append(CaseResult(index, error=e))
            continue
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("case %d -> %s", index, to_decimal(secret))
        results.append(CaseResult(index, secret=secret))
    return results


class Reporter:
    """Formats a list of CaseResult for output."""

    def __init__(self, results: list):
        self.results = results

    def to_dict(self) -> list:
        """Export as list of dicts. Secrets are decimal strings (JSON has no bigints)."""
        out = []
        for r in self.results:
            entry = {'index': r.index, 'ok': r.ok}
            if r.ok:
                entry['secret'] = to_decimal(r.secret)
            else:
                entry['error'] = type(r.error).__name__
                entry['message'] = str(r.error)
            out.append(entry)
        return out

    def to_json(self) -> str:
        return json.dumps(
            {'summary': self.summary(), 'results': self.to_dict()}, indent=2)

    def lines(self) -> list:
        """One line per case: the decimal secret, or 'error: <message>'."""
        return [to_decimal(r.secret) if r.ok else f"error: {r.error}"
                for r in self.results]

    def summary(self) -> dict:
        succeeded = sum(1 for r in self.results if r.ok)
        return {
            'total': len(self.results),
            'succeeded': succeeded,
            'failed': len(self.results) - succeeded,
        }
