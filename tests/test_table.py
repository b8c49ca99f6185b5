import pytest

from philo.parsing import Settings
from philo.table import Action, Philosopher, build_table


@pytest.mark.parametrize(
    "text, action",
    [
        ("has taken a fork 🍴", Action.FORK),
        ("is eating 🍝", Action.EAT),
        ("is sleeping 💤", Action.SLEEP),
        ("is thinking 💭", Action.THINK),
        ("died 💀", Action.DIED),
    ],
)
def test_action_looked_up_by_message(text, action):
    assert Action(text) is action
    assert action.value == text


def test_action_unknown_message_rejected():
    with pytest.raises(ValueError):
        Action("is dancing")


def test_build_table_seats_everyone():
    table = build_table(Settings(5, 800, 200, 200))
    assert len(table.forks) == 5
    assert [p.id for p in table.philosophers] == [1, 2, 3, 4, 5]
    assert len({id(lock) for lock in table.forks}) == 5
    assert table.over is False


def test_forks_form_a_ring():
    count = 6
    table = build_table(Settings(count, 800, 200, 200))
    for seat, philo in enumerate(table.philosophers):
        assert philo.left_fork == seat
        assert philo.right_fork == (seat + 1) % count
        assert philo.meals_eaten == 0
    rights = sorted(p.right_fork for p in table.philosophers)
    assert rights == list(range(count))


def test_fork_order_even_count():
    table = build_table(Settings(4, 800, 200, 200))
    first = table.philosophers[0]
    last = table.philosophers[-1]
    assert first.fork_order() == (first.left_fork, first.right_fork)
    assert last.fork_order() == (last.right_fork, last.left_fork)


def test_fork_order_odd_count_right_first():
    table = build_table(Settings(5, 800, 200, 200))
    for philo in table.philosophers:
        assert philo.fork_order() == (philo.right_fork, philo.left_fork)


def test_single_philosopher_shares_one_fork():
    table = build_table(Settings(1, 800, 200, 200))
    philo = table.philosophers[0]
    assert philo.left_fork == philo.right_fork == 0
    assert philo.fork_order() == (0, 0)


def test_philosophers_have_own_meal_locks():
    a = Philosopher(1, 0, 1, 2)
    b = Philosopher(2, 1, 0, 2)
    assert a.meal_lock is not b.meal_lock
    assert a.meal_lock.acquire(blocking=False) is True
    assert b.meal_lock.acquire(blocking=False) is True