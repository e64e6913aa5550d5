import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .constants import DEFAULT_NUM_PREDICTIONS, MAX_NUM_PREDICTIONS
from .engines import NodeJsMajorVersion
from .errors import PredictorError
from .predictor import create_predictor, environment_label
from .report import run_predictor

RED = "\x1b[31m"
YELLOW = "\x1b[33m"
RESET = "\x1b[0m"


def parse_strict_float(text):
    if "." not in text:
        raise argparse.ArgumentTypeError(f"Expected a float with decimal point, got '{text}'")
    try:
        return float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid float: {exc}") from exc


def parse_export_path(text):
    path = Path(text)
    if path.suffix != ".json":
        raise argparse.ArgumentTypeError(
            f"Expected 'export <path>' to point to a .json file, but got '{text}'"
        )
    return path


def parse_major_version(text):
    try:
        return NodeJsMajorVersion.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser():
    parser = argparse.ArgumentParser(
        prog="jsrp",
        description="Predict Math.random() output from a few observed values.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="log solver progress")

    shared = argparse.ArgumentParser(add_help=False)
    shared.add_argument(
        "-s", "--sequence", nargs="+", type=parse_strict_float, required=True,
        help="observed outputs, oldest first (floats with a decimal point)",
    )
    group = shared.add_mutually_exclusive_group()
    group.add_argument(
        "-p", "--predictions", type=int, default=DEFAULT_NUM_PREDICTIONS,
        help="number of predictions to make (default: %(default)s)",
    )
    group.add_argument(
        "-x", "--expected", nargs="+", type=parse_strict_float,
        help="expected next values; predicts that many and checks them",
    )
    shared.add_argument(
        "-e", "--export", type=parse_export_path,
        help="also write the JSON report to this .json file",
    )

    sub = parser.add_subparsers(dest="environment", required=True)
    node = sub.add_parser("node", parents=[shared], help="Node.js")
    node.add_argument(
        "-m", "--major-version", type=parse_major_version, required=True,
        help="Node.js major version, e.g. 22 or v24",
    )
    sub.add_parser("firefox", parents=[shared], help="Firefox")
    sub.add_parser("chrome", parents=[shared], help="Chrome")
    sub.add_parser("safari", parents=[shared], help="Safari")
    return parser


def _fit_node_budget(args):
    """Trims the request to what one V8 cache can serve; returns the warning, if any."""
    seq_len = len(args.sequence)
    wanted = len(args.expected) if args.expected is not None else args.predictions
    if seq_len + wanted <= MAX_NUM_PREDICTIONS:
        return None
    allowed = MAX_NUM_PREDICTIONS - seq_len
    args.predictions = allowed
    if args.expected is not None:
        args.expected = args.expected[:allowed]
    return (
        f"[WARNING] Results have been truncated to {allowed}. Max prediction limit exceeded!\n"
        f"Sequence length + number of predictions cannot exceed {MAX_NUM_PREDICTIONS}!"
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    warning = None
    if args.environment == "node":
        if len(args.sequence) >= MAX_NUM_PREDICTIONS:
            print(
                f"{RED}[ERROR] Sequence length exceeds limit! "
                f"Max sequence length is {MAX_NUM_PREDICTIONS - 1}!{RESET}",
                file=sys.stderr,
            )
            return 1
        warning = _fit_node_budget(args)

    try:
        predictor = create_predictor(
            args.environment, args.sequence, getattr(args, "major_version", None)
        )
        result = run_predictor(
            predictor, environment_label(predictor), args.predictions, args.expected
        )
    except PredictorError as exc:
        print(f"{RED}[ERROR] {exc}{RESET}", file=sys.stderr)
        return 1

    formatted = result.to_json()
    print(formatted)
    if args.export is not None:
        try:
            result.export(args.export)
        except OSError as exc:
            print(f"{RED}[ERROR] could not export to {args.export}: {exc}{RESET}", file=sys.stderr)
            return 1

    # warn only after the results have been shown
    if warning:
        print(f"{YELLOW}{warning}{RESET}", file=sys.stderr)
    return 0
