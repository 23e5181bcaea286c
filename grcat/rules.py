"""Rule model — one parsed config block per Rule, ordered into a RuleSet."""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from grcat.colours import PREVIOUS, UNCHANGED
from grcat.config import parse_bool

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a rule file cannot be read or holds an invalid rule."""


class CountMode(Enum):
    ONCE = "once"
    MORE = "more"
    BLOCK = "block"
    UNBLOCK = "unblock"

    @classmethod
    def from_value(cls, value: str) -> "CountMode":
        """Map a ``count=`` value to a mode, falling back to MORE."""
        normalized = value.strip().lower()
        for mode in cls:
            if mode.value == normalized:
                return mode
        logger.warning("Unsupported count value %r, using 'more'", value)
        return cls.MORE


@dataclass(frozen=True)
class Rule:
    pattern: str = ""
    colours: tuple[str, ...] = ("",)
    count: CountMode = CountMode.MORE
    command: str = ""
    skip: str = ""
    replace: str = ""
    concat: str = ""
    regex: re.Pattern | None = field(default=None, compare=False, repr=False)

    @property
    def primary_colour(self) -> str:
        """colours[0], with sentinels mapped to no styling."""
        colour = self.colours[0]
        if colour in (PREVIOUS, UNCHANGED):
            return ""
        return colour

    @property
    def is_unchanged(self) -> bool:
        return UNCHANGED in self.colours

    @property
    def skips_input(self) -> bool:
        return parse_bool(self.skip)


class RuleSet:
    """Immutable, ordered collection of rules; order is application order."""

    def __init__(self, rules):
        self._rules = tuple(rules)
        self.skips_all = any(rule.skips_input for rule in self._rules)

    def __iter__(self):
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __getitem__(self, index):
        return self._rules[index]

    def __repr__(self) -> str:
        return f"RuleSet({len(self._rules)} rules, skips_all={self.skips_all})"
