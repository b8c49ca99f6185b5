# philo

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread. The philosophers sit round a table with one fork between
each pair of neighbours. A philosopher takes both adjacent forks to eat,
then sleeps and thinks. A monitor thread stops the simulation when a
philosopher starves. It also stops it when every philosopher has eaten
the requested number of meals.

## Installation

```
pip install .
```

## Usage

```
philo nb_philos t_die t_eat t_sleep [nb_meals]
```

| Argument    | Meaning                                                        |
|-------------|----------------------------------------------------------------|
| `nb_philos` | Number of philosophers (must be > 0)                           |
| `t_die`     | Time in ms a philosopher can go without eating before dying   |
| `t_eat`     | Time in ms spent eating                                        |
| `t_sleep`   | Time in ms spent sleeping                                      |
| `nb_meals`  | Optional. The simulation ends once every philosopher has eaten this many meals |

Every argument must be made only of digits and be a positive whole number
that fits in a 32-bit signed integer. When the arguments are rejected, an
error message is written to standard error and the exit status is 1:

- with too few or too many arguments, or a value of zero or one that is
  too large, the message is followed by a usage box;
- with an argument holding anything other than digits, only the message
  is written.

On success the exit status is 0.

### Example

```
philo 5 800 200 200 7
```

Each event is printed to standard output as one line: the milliseconds
since the start, the philosopher's number and the action:

```
0 1 has taken a fork 🍴
0 1 has taken a fork 🍴
0 1 is eating 🍝
200 1 is sleeping 💤
...
```

When a philosopher starves, the simulation prints `died 💀` for that
philosopher, and no further lines appear after it. A lone philosopher
takes the single fork and never eats, so it dies after `t_die` ms.

## Library use

```python
from philo.parsing import parse_args
from philo.simulation import Simulation

settings = parse_args(["4", "410", "200", "200", "3"])
Simulation(settings).run()
```

- `philo.parsing.parse_args(args)` takes the arguments without the program
  name and returns a frozen `Settings` (`nb_philos`, `t_die`, `t_eat`,
  `t_sleep`, `nb_meals`, the last being `None` when not given). It raises
  `ArgumentError`, whose `report` property holds the text to show the user.
- `philo.simulation.Simulation(settings, out=None)` writes its event lines
  to `out`, or to standard output when `out` is `None`. `run()` blocks
  until the simulation ends.
- `philo.table.build_table(settings)` creates the forks and the seated
  `Philosopher` objects; `Action` lists the printed messages.
- `philo.cli.main(argv=None)` runs the command and returns its exit status.