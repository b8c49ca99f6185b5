"""The table: philosophers, forks and the locks that guard shared state."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum

from philo.parsing import Settings


class Action(str, Enum):
    """Messages printed for each philosopher state change."""

    FORK = "has taken a fork 🍴"
    EAT = "is eating 🍝"
    SLEEP = "is sleeping 💤"
    THINK = "is thinking 💭"
    DIED = "died 💀"


@dataclass(eq=False)
class Philosopher:
    """One seat at the table; forks are indices into Table.forks."""

    id: int
    left_fork: int
    right_fork: int
    seats: int
    meals_eaten: int = 0
    last_meal: int = 0
    meal_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def fork_order(self) -> tuple[int, int]:
        """The fork indices in the order this philosopher picks them up."""
        if self.left_fork < self.right_fork and self.seats % 2 == 0:
            return self.left_fork, self.right_fork
        return self.right_fork, self.left_fork


@dataclass(eq=False)
class Table:
    """Shared simulation state."""

    settings: Settings
    forks: list[threading.Lock]
    philosophers: list[Philosopher]
    print_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    state_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    start_time: int = 0
    over: bool = False


def build_table(settings: Settings) -> Table:
    """Create forks and seat the philosophers around them."""
    count = settings.nb_philos
    forks = [threading.Lock() for _ in range(count)]
    philosophers = [
        Philosopher(id=seat + 1, left_fork=seat, right_fork=(seat + 1) % count, seats=count)
        for seat in range(count)
    ]
    return Table(settings=settings, forks=forks, philosophers=philosophers)