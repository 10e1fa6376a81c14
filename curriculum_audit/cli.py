"""
Command-Line Interface for the curriculum audit system.

    python -m curriculum_audit [curriculum.json] [courses.json]
        [--no-autopopulate] [--move "PHIL 2110=HASS"] [--verbose]

Without arguments, the sample documents under data/ are audited.
"""

import argparse
import logging

from .auditor import CurriculumAuditor
from .config import LOG_FORMAT, SAMPLE_COURSES_PATH, SAMPLE_CURRICULUM_PATH
from .ui import TerminalDisplay


def _parse_move(value: str) -> tuple:
    """Turn "PHIL 2110=HASS" into ("PHIL 2110", "HASS")."""
    code, sep, set_name = value.partition("=")
    if not sep or not code.strip() or not set_name.strip():
        raise argparse.ArgumentTypeError(f"expected CODE=SET, got {value!r}")
    return code.strip(), set_name.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curriculum-audit",
        description="Audit completed courses against a degree curriculum",
    )
    parser.add_argument("curriculum", nargs="?", default=str(SAMPLE_CURRICULUM_PATH),
                        help="curriculum JSON document")
    parser.add_argument("courses", nargs="?", default=str(SAMPLE_COURSES_PATH),
                        help="student course JSON document")
    parser.add_argument("--no-autopopulate", dest="autopopulate", action="store_false",
                        help="evaluate without placing courses first")
    parser.add_argument("--move", action="append", type=_parse_move, default=[],
                        metavar="CODE=SET", help="move a course into a set after autopopulation")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def run(argv=None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    auditor = CurriculumAuditor()
    try:
        auditor.run_audit(args.curriculum, args.courses,
                          autopopulate=args.autopopulate, moves=args.move)
    except (FileNotFoundError, KeyError, ValueError) as e:
        TerminalDisplay.print_error(str(e))
        return 2
    return 0


def main():
    raise SystemExit(run())


if __name__ == "__main__":
    main()
