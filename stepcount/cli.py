"""
Command-line step counter.

Usage:
    stepcount walk.csv
    stepcount walk.csv --json
    python -m stepcount walk.csv --max-samples 2048 --threshold-ratio 0.5
"""

import argparse
import json
import sys

from .config import MAX_SAMPLES, PASSBAND_HZ, SAMPLE_RATE_HZ, THRESHOLD_RATIO
from .errors import StepCountError
from .pipeline import analyze
from .recording import load_samples


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stepcount",
        description=(
            f"Count steps in a {SAMPLE_RATE_HZ:g} Hz 3-axis accelerometer CSV recording "
            f"({PASSBAND_HZ[0]:g}-{PASSBAND_HZ[1]:g} Hz gait band)."
        ),
    )
    parser.add_argument("path", help="CSV file: one header line, then x,y,z per line")
    parser.add_argument("--max-samples", type=int, default=MAX_SAMPLES,
                        help="read at most this many samples (0 = no limit)")
    parser.add_argument("--threshold-ratio", type=float, default=THRESHOLD_RATIO,
                        help="hysteresis level as a fraction of the filtered RMS")
    parser.add_argument("--json", action="store_true",
                        help="print the report as JSON")
    parser.add_argument("--dump-filtered", action="store_true",
                        help="print the filtered signal, one value per line "
                             "(with --json: add it to the report as \"filtered\")")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_samples < 0:
        parser.error("--max-samples must be >= 0")
    if args.threshold_ratio <= 0:
        parser.error("--threshold-ratio must be > 0")

    try:
        samples = load_samples(args.path, max_samples=args.max_samples)
        report = analyze(samples, threshold_ratio=args.threshold_ratio)
    except StepCountError as e:
        print(f"[Error] {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(report.to_dict(include_filtered=args.dump_filtered), indent=2))
        return 0

    if args.dump_filtered:
        for v in report.filtered:
            print(f"{v:f}")

    gx, gy, gz = report.gravity
    print(f"vectors read: {report.n_samples}")
    print(f"normalized gravity vector: {gx:f} {gy:f} {gz:f}")
    print(f"rms: {report.rms:f}")
    print(f"cnt: {report.steps}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
