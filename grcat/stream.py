"""Stream driver — read lines, colourise, write, until end of stream."""

import logging
from dataclasses import dataclass
from typing import TextIO

from grcat.colorizer import colorize
from grcat.rules import RuleSet

logger = logging.getLogger(__name__)


@dataclass
class StreamStats:
    lines_read: int = 0
    lines_written: int = 0
    lines_suppressed: int = 0


def run(rules: RuleSet, infile: TextIO, outfile: TextIO, flush: bool = True) -> StreamStats:
    """Colourise infile into outfile one line at a time.

    Suppressed lines are still read so the upstream writer never sees a
    closed pipe. OSError from reading propagates to the caller.
    """
    stats = StreamStats()
    if rules.skips_all:
        logger.info("A rule sets skip, suppressing all input")

    while True:
        raw = infile.readline()
        if raw == "":
            break
        stats.lines_read += 1

        result = colorize(raw.rstrip("\r\n"), rules)
        if result is None:
            stats.lines_suppressed += 1
            continue

        outfile.write(result + "\n")
        if flush:
            outfile.flush()
        stats.lines_written += 1

    logger.debug("Stream done: %d read, %d written, %d suppressed",
                 stats.lines_read, stats.lines_written, stats.lines_suppressed)
    return stats
