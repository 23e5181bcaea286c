"""grcat — colourise standard input using a grc rule file."""

import logging
import os
import sys
from argparse import ArgumentParser

from grcat.config import LOG_LEVELS, load_settings, load_yaml_settings
from grcat.locator import candidate_dirs, find_config
from grcat.parser import read_config
from grcat.rules import ConfigError
from grcat.stream import run

logger = logging.getLogger("grcat")


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="grcat",
        description="Colourise standard input using a grc rule file.",
    )
    parser.add_argument(
        "conffile",
        help="Rule file name, searched in the grc config directories, or a path",
    )
    parser.add_argument(
        "--settings",
        default=None,
        help="Path to a YAML settings file (log_level, search_dirs, flush)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Diagnostic verbosity on stderr (default: WARNING)",
    )
    return parser


def run_filter(args) -> int:
    """Locate and parse the rule file, then filter stdin to stdout."""
    settings = load_settings(load_yaml_settings(args.settings))
    if args.log_level:
        logging.getLogger().setLevel(args.log_level)
    else:
        logging.getLogger().setLevel(settings.log_level)

    dirs = candidate_dirs(extra_dirs=settings.search_dirs)
    path = find_config(args.conffile, dirs)
    if path is None:
        logger.error("config file [%s] not found", args.conffile)
        return 1

    try:
        rules = read_config(path)
    except ConfigError as e:
        logger.error("%s", e)
        return 1

    sys.stdin.reconfigure(errors="replace")
    sys.stdout.reconfigure(errors="replace")
    try:
        run(rules, sys.stdin, sys.stdout, flush=settings.flush)
    except BrokenPipeError:
        # Downstream closed early (e.g. `| head`); stop quietly
        os.dup2(os.open(os.devnull, os.O_WRONLY), sys.stdout.fileno())
        return 0
    except OSError as e:
        logger.error("I/O error on stdin or stdout: %s", e)
        return 1
    return 0


def main():
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [grcat] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    parser = build_parser()
    args = parser.parse_args()
    try:
        sys.exit(run_filter(args))
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
