"""Line colorizer — applies a RuleSet to one line of input."""

import re

from grcat.colours import RESET, wrap
from grcat.rules import CountMode, RuleSet


def colorize_match(line: str, regex: re.Pattern, colour: str, limit: int = 0) -> str:
    """Wrap each non-empty match of regex in colour + reset.

    Matches are spliced in by position, so repeated identical substrings are
    each coloured exactly once. ``limit`` caps the number of matches coloured
    (0 means all).
    """
    parts = []
    pos = 0
    coloured = 0
    for m in regex.finditer(line):
        start, end = m.span()
        if start == end:
            continue
        parts.append(line[pos:start])
        parts.append(wrap(m.group(0), colour))
        pos = end
        coloured += 1
        if limit and coloured >= limit:
            break

    if not coloured:
        return line
    parts.append(line[pos:])
    return "".join(parts)


def colorize(line: str, rules: RuleSet) -> str | None:
    """Return the colourised line, or None if the line is suppressed.

    Each rule works on the output of the previous one, escape codes included.
    """
    if rules.skips_all:
        return None

    for rule in rules:
        if rule.is_unchanged and rule.count is not CountMode.UNBLOCK:
            continue
        if rule.count is CountMode.BLOCK:
            line = wrap(line, rule.primary_colour)
        elif rule.count is CountMode.UNBLOCK:
            line = wrap(line, RESET)
        elif rule.regex is None:
            continue
        else:
            limit = 1 if rule.count is CountMode.ONCE else 0
            line = colorize_match(line, rule.regex, rule.primary_colour, limit)

    return line
