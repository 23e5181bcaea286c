"""Rule file parser — key=value blocks separated by divider lines."""

import logging
import re

from grcat.colours import parse_colour_list
from grcat.rules import ConfigError, CountMode, Rule, RuleSet

logger = logging.getLogger(__name__)

FIELDS = ("regexp", "colours", "count", "command", "skip", "replace", "concat")


def is_blank_or_comment(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def is_separator_line(line: str) -> bool:
    """True if the first non-blank character is not an ASCII letter.

    Blank and comment lines are never separators.
    """
    if is_blank_or_comment(line):
        return False
    first = line.lstrip()[0]
    return not (first.isascii() and first.isalpha())


def parse_config_line(line: str, line_no: int = 0) -> tuple[str, str] | None:
    """Split a ``key=value`` line. Returns None for lines to drop."""
    if is_blank_or_comment(line):
        return None

    key, sep, value = line.partition("=")
    if not sep:
        logger.warning("Line %d: expected keyword=value, got: %s", line_no, line)
        return None

    key = key.strip()
    if key.startswith("colo"):
        key = "colours"
    return key, value


def build_rule(pairs: list[tuple[str, str]], index: int = 0) -> Rule:
    """Turn the key/value pairs of one block into a Rule.

    Later pairs override earlier ones; unknown keys are logged and ignored.
    Raises ConfigError if the regexp does not compile.
    """
    values: dict = {}
    for key, value in pairs:
        if key == "regexp":
            values["pattern"] = value
        elif key == "colours":
            values["colours"] = tuple(parse_colour_list(value)) or ("",)
        elif key == "count":
            values["count"] = CountMode.from_value(value)
        elif key in FIELDS:
            values[key] = value
        else:
            logger.warning("Rule %d: %r is not a known key, ignoring", index, key)

    pattern = values.get("pattern", "")
    try:
        values["regex"] = re.compile(pattern) if pattern else None
    except re.error as e:
        raise ConfigError(f"Rule {index}: invalid regexp {pattern!r}: {e}") from e

    return Rule(**values)


def parse_config(text: str) -> RuleSet:
    """Parse rule file text into a RuleSet.

    N separator lines always yield N+1 rules, even for an empty file.
    """
    pending: list[tuple[str, str]] = []
    rules = []

    for line_no, line in enumerate(text.splitlines(), start=1):
        if is_separator_line(line):
            rules.append(build_rule(pending, len(rules)))
            pending = []
            continue

        pair = parse_config_line(line, line_no)
        if pair is not None:
            pending.append(pair)

    rules.append(build_rule(pending, len(rules)))
    logger.debug("Parsed %d rules", len(rules))
    return RuleSet(rules)


def read_config(path) -> RuleSet:
    """Read and parse a rule file. I/O failures raise ConfigError."""
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError as e:
        raise ConfigError(f"Can not read {path}: {e}") from e
    logger.info("Loaded rules from %s", path)
    return parse_config(text)
