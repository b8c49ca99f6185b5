"""Command-line argument validation and conversion for the dining philosophers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

INT_MAX = 2**31 - 1

RED = "\033[1;31m"
RESET = "\033[0m"

USAGE_BOX = (
    "┌──────────────────────────────────────────────────────────────┐\n"
    "│                           Usage                              │\n"
    "├──────────────────────────────────────────────────────────────┤\n"
    "│        ./philo nb_philos t_die t_eat t_sleep [nb_meals]      │\n"
    "├──────────────────────────────────────────────────────────────┤\n"
    "│  nb_philos : Number of philosophers (must be > 0)            │\n"
    "│  t_die     : Time to die (ms)                                │\n"
    "│  t_eat     : Time to eat (ms)                                │\n"
    "│  t_sleep   : Time to sleep (ms)                              │\n"
    "│  nb_meals  : (optional) Number of meals                      │\n"
    "└──────────────────────────────────────────────────────────────┘"
)

MSG_NOT_ENOUGH = "Wrong arguments: Not enough arguments !"
MSG_TOO_MANY = "Wrong arguments: Too many arguments !"
MSG_NOT_DIGITS = "Wrong arguments: Please enter only integer numbers !"
MSG_OUT_OF_RANGE = "Wrong arguments: invalid or out-of-range value"
MSG_NO_PHILOS = "Wrong arguments: The number of philosophers must be > 0"

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


class ArgumentError(ValueError):
    """Raised when the command-line arguments are unusable."""

    def __init__(self, message: str, show_usage: bool = True) -> None:
        super().__init__(message)
        self.message = message
        self.show_usage = show_usage

    @property
    def report(self) -> str:
        """The full text to show the user, usage box included when relevant."""
        if self.show_usage:
            return usage(self.message)
        return f"{RED}{self.message}{RESET}\n"


@dataclass(frozen=True)
class Settings:
    """Validated simulation parameters; times are in milliseconds."""

    nb_philos: int
    t_die: int
    t_eat: int
    t_sleep: int
    nb_meals: int | None = None


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _scan(text: str) -> int:
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def atoi(text: str) -> int:
    """Leading-whitespace, optional-sign decimal prefix, wrapped to 32 bits."""
    return _wrap(_scan(text), 32)


def atol(text: str) -> int:
    """Leading-whitespace, optional-sign decimal prefix, wrapped to 64 bits."""
    return _wrap(_scan(text), 64)


def is_str_digit(text: str | None) -> bool:
    """True if text is non-empty and made only of ASCII digits."""
    if not text:
        return False
    return all("0" <= ch <= "9" for ch in text)


def check_arg(args: Sequence[str]) -> bool:
    """True unless a four- or five-argument list holds a non-digit argument."""
    if len(args) in (4, 5):
        return all(is_str_digit(arg) for arg in args)
    return True


def parse_input(args: Sequence[str]) -> bool:
    """True if every argument is a positive integer no larger than INT_MAX."""
    for arg in args:
        body = arg[1:] if arg.startswith("+") else arg
        if not all("0" <= ch <= "9" for ch in body):
            return False
        value = atol(arg)
        if value <= 0 or value > INT_MAX:
            return False
    return True


def usage(message: str) -> str:
    """The error message followed by the usage box."""
    return f"{RED}{message}\n{RESET}\n{USAGE_BOX}\n"


def parse_args(args: Sequence[str]) -> Settings:
    """Validate the arguments (program name excluded) and build Settings."""
    args = list(args)
    if len(args) < 4:
        raise ArgumentError(MSG_NOT_ENOUGH)
    if len(args) > 5:
        raise ArgumentError(MSG_TOO_MANY)
    if not check_arg(args):
        raise ArgumentError(MSG_NOT_DIGITS, show_usage=False)
    if not parse_input(args):
        raise ArgumentError(MSG_OUT_OF_RANGE)
    nb_philos = atoi(args[0])
    if nb_philos <= 0:
        raise ArgumentError(MSG_NO_PHILOS)
    nb_meals = atoi(args[4]) if len(args) == 5 else None
    return Settings(
        nb_philos=nb_philos,
        t_die=atoi(args[1]),
        t_eat=atoi(args[2]),
        t_sleep=atoi(args[3]),
        nb_meals=nb_meals,
    )