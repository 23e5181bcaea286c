"""Colour names — symbolic name to ANSI escape sequence lookup."""

import logging
import re

logger = logging.getLogger(__name__)

# Sentinels: markers for the colorizer, never written to the terminal
PREVIOUS = "prev"
UNCHANGED = "unchanged"

COLOURS = {
    "none": "",
    "default": "\033[0m",
    "bold": "\033[1m",
    "underline": "\033[4m",
    "blink": "\033[5m",
    "reverse": "\033[7m",
    "concealed": "\033[8m",

    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",

    "on_black": "\033[40m",
    "on_red": "\033[41m",
    "on_green": "\033[42m",
    "on_yellow": "\033[43m",
    "on_blue": "\033[44m",
    "on_magenta": "\033[45m",
    "on_cyan": "\033[46m",
    "on_white": "\033[47m",

    "beep": "\007",
    "previous": PREVIOUS,
    "unchanged": UNCHANGED,

    # non-standard attributes, supported by some terminals
    "dark": "\033[2m",
    "italic": "\033[3m",
    "rapidblink": "\033[6m",
    "strikethrough": "\033[9m",

    # aixterm bright colours, prefixed with the standard code so terminals
    # without aixterm support fall back to the plain colour
    "bright_black": "\033[30;90m",
    "bright_red": "\033[31;91m",
    "bright_green": "\033[32;92m",
    "bright_yellow": "\033[33;93m",
    "bright_blue": "\033[34;94m",
    "bright_magenta": "\033[35;95m",
    "bright_cyan": "\033[36;96m",
    "bright_white": "\033[37;97m",

    "on_bright_black": "\033[40;100m",
    "on_bright_red": "\033[41;101m",
    "on_bright_green": "\033[42;102m",
    "on_bright_yellow": "\033[43;103m",
    "on_bright_blue": "\033[44;104m",
    "on_bright_magenta": "\033[45;105m",
    "on_bright_cyan": "\033[46;106m",
    "on_bright_white": "\033[47;107m",
}

RESET = COLOURS["default"]

_TOKEN_SPLIT = re.compile(r"\s+")


def resolve(name: str) -> str:
    """Return the escape sequence for a colour name.

    Unknown names resolve to the reset sequence instead of failing, so a typo
    in one rule never stops the pipeline.
    """
    try:
        return COLOURS[name]
    except KeyError:
        logger.warning("Unknown colour %r, using default", name)
        return RESET


def parse_colour_list(raw: str) -> list[str]:
    """Resolve a config value like ``"red bold,on_blue"`` to escape codes.

    Groups (comma separated) are flattened; empty tokens are dropped.
    """
    colours = []
    for group in raw.split(","):
        for token in _TOKEN_SPLIT.split(group):
            if token:
                colours.append(resolve(token))
    return colours


def wrap(text: str, colour: str) -> str:
    """Surround text with a colour and a trailing reset."""
    return f"{colour}{text}{RESET}"
