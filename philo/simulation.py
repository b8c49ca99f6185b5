"""The dining philosophers simulation: philosopher threads and the monitor."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from philo.parsing import Settings
from philo.table import Action, Philosopher, build_table

_POLL = 0.0005


def get_time() -> int:
    """Wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


def sleep_ms(ms: int) -> None:
    """Sleep for at least ms milliseconds, polling in short steps."""
    start = get_time()
    while get_time() - start < ms:
        time.sleep(_POLL)


class Simulation:
    """Runs one dinner: a thread per philosopher plus a monitor thread."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.table = build_table(settings)

    def is_over(self) -> bool:
        """True once a philosopher has died or everyone has eaten enough."""
        with self.table.state_lock:
            return self.table.over

    def _stop(self) -> None:
        with self.table.state_lock:
            self.table.over = True

    def print_action(self, philo: Philosopher, action: Action | str) -> None:
        """Log an action with its timestamp, unless the simulation is over."""
        text = action.value if isinstance(action, Action) else action
        with self.table.state_lock:
            if self.table.over:
                return
            with self.table.print_lock:
                timestamp = get_time() - self.table.start_time
                self.out.write(f"{timestamp} {philo.id} {text}\n")
                self.out.flush()

    def philo_eat(self, philo: Philosopher) -> None:
        """Take both forks, eat for t_eat milliseconds, then put them down."""
        first_index, second_index = philo.fork_order()
        first = self.table.forks[first_index]
        second = self.table.forks[second_index]
        with first:
            self.print_action(philo, Action.FORK)
            with second:
                self.print_action(philo, Action.FORK)
                with philo.meal_lock:
                    philo.last_meal = get_time()
                    self.print_action(philo, Action.EAT)
                    philo.meals_eaten += 1
                sleep_ms(self.settings.t_eat)

    def sleep_and_think(self, philo: Philosopher) -> None:
        """Sleep for t_sleep milliseconds, then start thinking."""
        self.print_action(philo, Action.SLEEP)
        sleep_ms(self.settings.t_sleep)
        self.print_action(philo, Action.THINK)

    def _has_eaten_enough(self, philo: Philosopher) -> bool:
        meals = self.settings.nb_meals
        return meals is not None and meals > 0 and philo.meals_eaten >= meals

    def check_meals(self, philo: Philosopher) -> bool:
        """True if this philosopher has eaten the required number of meals."""
        with philo.meal_lock:
            return self._has_eaten_enough(philo)

    def check_death(self, philo: Philosopher) -> bool:
        """True if the philosopher has starved; the first death is announced."""
        with philo.meal_lock:
            last_meal = philo.last_meal
        if get_time() - last_meal < self.settings.t_die:
            return False
        with self.table.state_lock:
            if not self.table.over:
                with self.table.print_lock:
                    timestamp = get_time() - self.table.start_time
                    self.out.write(f"{timestamp} {philo.id} {Action.DIED.value}\n")
                    self.out.flush()
                self.table.over = True
        return True

    def check_full(self) -> tuple[bool, int]:
        """Scan the table: whether someone died, and how many are full."""
        full = 0
        for philo in self.table.philosophers:
            with philo.meal_lock:
                if self._has_eaten_enough(philo):
                    full += 1
            if self.check_death(philo):
                return True, full
        return False, full

    def monitor(self) -> None:
        """Watch for deaths and for everyone being full, then stop."""
        while not self.is_over():
            died, full = self.check_full()
            if died:
                return
            meals = self.settings.nb_meals
            if meals is not None and meals > 0 and full == self.settings.nb_philos:
                self._stop()
                return
            time.sleep(_POLL)

    def routine(self, philo: Philosopher) -> None:
        """The life of one philosopher: eat, sleep, think, until done."""
        if self.settings.nb_philos == 1:
            self.print_action(philo, Action.FORK)
            return
        if philo.id % 2 == 0:
            time.sleep(_POLL)
        while not self.is_over():
            self.philo_eat(philo)
            if self.check_meals(philo):
                break
            self.sleep_and_think(philo)

    def run(self) -> None:
        """Run the simulation to completion."""
        self.table.start_time = get_time()
        for philo in self.table.philosophers:
            with philo.meal_lock:
                philo.last_meal = self.table.start_time
        threads = [
            threading.Thread(target=self.routine, args=(philo,), daemon=True)
            for philo in self.table.philosophers
        ]
        for thread in threads:
            thread.start()
        watcher = threading.Thread(target=self.monitor, daemon=True)
        watcher.start()
        watcher.join()
        for thread in threads:
            thread.join()