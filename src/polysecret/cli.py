"""Command-line entry point: reconstruct secrets from a JSON file of cases."""

import argparse
import json
import logging
import sys

from polysecret.batch import Reporter, load_cases, run_cases
from polysecret.numtext import to_decimal

logger = logging.getLogger(__name__)

DEFAULT_INPUT = 'input.json'

EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_CASE_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog='polysecret',
        description="Recover f(0) from k polynomial shares by exact "
                    "Lagrange interpolation.")
    ap.add_argument('input', nargs='?', default=DEFAULT_INPUT,
                    help=f"JSON file holding one case or a list of cases "
                         f"(default: {DEFAULT_INPUT})")
    ap.add_argument('--json', action='store_true', dest='as_json',
                    help="print a JSON report instead of one secret per line")
    ap.add_argument('-v', '--verbose', action='store_true',
                    help="log intermediate interpolation state")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    # secrets routinely exceed the default 4300-digit str limit (3.11+)
    if hasattr(sys, 'set_int_max_str_digits'):
        sys.set_int_max_str_digits(0)

    try:
        with open(args.input, encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.error("Cannot find %r", args.input)
        return EXIT_BAD_INPUT
    except OSError as e:
        logger.error("Cannot read %r: %s", args.input, e)
        return EXIT_BAD_INPUT
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.error("Failed to parse JSON in %r: %s", args.input, e)
        return EXIT_BAD_INPUT

    results = run_cases(load_cases(data))
    reporter = Reporter(results)
    if args.as_json:
        print(reporter.to_json())
    else:
        # failures were already logged by run_cases
        for r in results:
            if r.ok:
                print(to_decimal(r.secret))

    if all(r.ok for r in results):
        return EXIT_OK
    return EXIT_CASE_FAILED


if __name__ == '__main__':
    sys.exit(main())
