#!/usr/bin/env python3
"""
Poly Secret CLI — recover a polynomial's constant term from base-encoded shares.

Usage:
    cli.py solve test1.json test2.json [--report] [--json]
    cli.py solve test1.json --method newton gaussian --primary gaussian
    cli.py solve test1.json --float
    cli.py decode 111 --base 2
    cli.py inspect test1.json
"""

import argparse
import json
import logging
import os
import sys

from poly_secret import base, points, recovery, report
from poly_secret.interpolate import DEFAULT_METHODS, METHODS


def _load(path):
    """Load a record, printing the error and returning None on failure."""
    if not os.path.exists(path):
        print(f"Error: file not found: {path}", file=sys.stderr)
        return None
    try:
        return recovery.load_record(path)
    except OSError as e:
        print(f"Error: cannot read {path}: {e}", file=sys.stderr)
        return None
    except ValueError as e:
        print(f"Error: {path} is not valid JSON: {e}", file=sys.stderr)
        return None


def cmd_solve(args):
    """Solve one or more record files."""
    methods = tuple(args.method or DEFAULT_METHODS)
    primary = args.primary or methods[0]

    results = []
    documents = []
    failed = 0
    for number, path in enumerate(args.files, 1):
        record = _load(path)
        if record is None:
            failed += 1
            continue

        try:
            rec = recovery.solve(record, methods=methods, primary=primary, exact=not args.float)
        except ValueError as e:
            print(f"Error processing {path}: {e}", file=sys.stderr)
            failed += 1
            continue

        if args.json:
            doc = rec.to_dict()
            doc["file"] = path
            documents.append(doc)
        elif args.report:
            print(f"\nPROCESSING TEST CASE {number} from {path}")
            print(report.format_recovery(rec))
        else:
            agree = 'yes' if rec.validation.agree else 'NO'
            print(f"{path}: secret = {rec.secret} (k={rec.k}, methods agree: {agree})")

        results.append((number, path, rec.secret))

    # One JSON document per run: an object for one file, a list for several
    if args.json:
        if len(args.files) == 1:
            if documents:
                print(json.dumps(documents[0], indent=2))
        else:
            print(json.dumps(documents, indent=2))
    elif len(args.files) > 1:
        print(f"\n{'='*60}")
        print("FINAL SUMMARY")
        print(f"{'='*60}")
        for number, path, secret in results:
            print(f"Test Case {number} ({path}) Secret: {secret}")
        print(f"\nSuccessfully processed {len(results)} of {len(args.files)} file(s)")

    return 1 if failed else 0


def cmd_decode(args):
    """Decode a single value."""
    try:
        value = base.decode(args.value, args.base)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(value)
    return 0


def cmd_inspect(args):
    """Show a record's parameters and decoded shares without solving."""
    record = _load(args.file)
    if record is None:
        return 1

    try:
        n, k, shares = points.parse_record(record)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Shares (n):    {n}")
    print(f"Threshold (k): {k}")
    print(f"Degree:        {k - 1}")
    print(f"Present:       {len(shares)}")

    errors = 0
    for index in sorted(shares):
        share = shares[index]
        try:
            decoded = base.decode(share.value, share.base)
        except ValueError as e:
            print(f"  [{index}] base {share.base:>2}  {share.value}  ->  ⚠️  {e}")
            errors += 1
            continue
        print(f"  [{index}] base {share.base:>2}  {share.value}  ->  {decoded}")

    return 1 if errors else 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='poly-secret',
        description='Recover the constant term of a polynomial from base-encoded shares.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Record format:
  {
      "keys": { "n": 4, "k": 3 },
      "1": { "base": "10", "value": "4" },
      "2": { "base": "2", "value": "111" },
      ...
  }

Examples:
  # Solve two records and print a summary
  %(prog)s solve test1.json test2.json

  # Full diagnostic report (tables, matrices, weights)
  %(prog)s solve test1.json --report

  # Decode a value
  %(prog)s decode 213 --base 4
        """
    )
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='More logging (-v info, -vv debug)')

    sub = parser.add_subparsers(dest='command', help='Command')

    # Solve
    p_solve = sub.add_parser('solve', help='Recover the secret from record files')
    p_solve.add_argument('files', nargs='+', help='JSON record files')
    p_solve.add_argument('--method', '-m', nargs='+', choices=sorted(METHODS),
                         help=f"Methods to run (default: {' '.join(DEFAULT_METHODS)})")
    p_solve.add_argument('--primary', '-p', choices=sorted(METHODS),
                         help='Method whose result is reported (default: first method)')
    p_solve.add_argument('--float', action='store_true',
                         help='Use native floating point instead of exact fractions')
    p_solve.add_argument('--report', '-r', action='store_true',
                         help='Print the full diagnostic report')
    p_solve.add_argument('--json', action='store_true', help='Print results as JSON')

    # Decode
    p_decode = sub.add_parser('decode', help='Decode a value from a base')
    p_decode.add_argument('value', help='Digit string')
    p_decode.add_argument('--base', '-b', type=int, required=True, help='Base (2-36)')

    # Inspect
    p_inspect = sub.add_parser('inspect', help='Show a record without solving')
    p_inspect.add_argument('file', help='JSON record file')

    args = parser.parse_args(argv)

    level = [logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)]
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    if not args.command:
        parser.print_help()
        return 1

    handlers = {
        'solve': cmd_solve,
        'decode': cmd_decode,
        'inspect': cmd_inspect,
    }

    return handlers[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
