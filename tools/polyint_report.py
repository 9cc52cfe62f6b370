#!/usr/bin/env python3
"""
Run every backend on one quartic-integral config and report the results.

Exit codes:
- 0: the exact backends agree,
- 1: they disagree (or the ring backend could not produce a result),
- 2: the config could not be loaded.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from polyint.core.config import REFERENCE_FIXTURE, ConfigError, load_config
from polyint.core.oracles import exact_integral
from polyint.core.ring import Backend, Combinator
from polyint.integration import CollectingResultSink, LoggingResultSink, results_agree, run_backends


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--config", type=Path, help="YAML config (default: built-in reference fixture)")
    ap.add_argument("--intervals", type=int, help="override interval_count for quadrature")
    ap.add_argument("--width", type=int, help="override ring register width in bits")
    ap.add_argument("--simpson", action="store_true", help="also run composite Simpson quadrature")
    ap.add_argument(
        "--xor-unsafe",
        action="store_true",
        help="run the ring backend with the XOR combinator (historical defect, regression only)",
    )
    ap.add_argument("--json", action="store_true", help="print a JSON document instead of text lines")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else REFERENCE_FIXTURE
        overrides: dict[str, object] = {}
        if args.intervals is not None:
            overrides["interval_count"] = args.intervals
        if args.width is not None:
            overrides["width"] = args.width
        if args.xor_unsafe:
            overrides["combinator"] = Combinator.XOR
            overrides["allow_unsafe"] = True
        if overrides:
            config = dataclasses.replace(config, **overrides)
    except (ConfigError, OSError, TypeError, ValueError) as exc:
        print(f"[polyint] config error: {exc}", file=sys.stderr)
        return 2

    backends = [Backend.RING, Backend.EXACT_ANTIDERIVATIVE, Backend.TRAPEZOID]
    if args.simpson:
        backends.append(Backend.SIMPSON)

    sink = LoggingResultSink() if args.verbose else CollectingResultSink()
    results = run_backends(config, sink, backends=backends)
    agree = results_agree(results)
    exact = exact_integral(config.coefficients, config.x_start, config.x_end)

    if args.json:
        doc = {
            "interval": [config.x_start, config.x_end],
            "coefficients": list(config.coefficients),
            "results": [
                {"label": r.label, "value": r.value, "abs_error": abs(float(r.value) - exact)}
                for r in results
            ],
            "agree": agree,
        }
        print(json.dumps(doc, indent=2, sort_keys=True))
    else:
        for r in results:
            print(f"[polyint] {r.label:<24} {r.value!s:>24}  |err|={abs(float(r.value) - exact):.3e}")
        print(f"[polyint] {'OK: exact backends agree' if agree else 'FAIL: exact backends disagree'}")
    return 0 if agree else 1


if __name__ == "__main__":
    raise SystemExit(main())
