# philosim

A small threaded simulation of philosophers. Each philosopher runs in
its own thread. It repeatedly adds its idle time to a lived-time
counter and then sleeps for that idle time. The main thread checks the
philosophers in turn. When one of them has lived long enough, it is
marked dead, the simulation stops and every thread is joined.

Philosopher `n` has an idle time of `100000 * (10 // n)` simulated
microseconds, so philosopher 1 lives in steps of 1 000 000, philosopher
2 in steps of 500 000, and so on. Philosophers numbered above 10 have an
idle time of 0 and never add to their lived time.

## Installation

```
pip install .
```

## Usage

```
philosim NOP WP|TTD
```

- `NOP`: the number of philosophers (at least 1).
- `WP`: a positive number naming the philosopher that should die
  (counting from 1). A time is picked at random, a whole number of
  seconds from 1 to 10; that philosopher dies once its lived time
  reaches it.
- `TTD`: a negative number. The first philosopher, checked in turn,
  whose lived time reaches that many milliseconds dies.

Give either `WP` or `TTD`. Numbers are read leniently: leading
whitespace and a sign are accepted, and reading stops at the first
character that is not a digit (`3abc` reads as 3).

Examples:

```
philosim 2 -300    # a philosopher dies once it has lived 300 ms
philosim 3 2       # philosopher 2 dies after a random 1-10 seconds
```

If the number of arguments is wrong, the usage message is printed to
standard output and the command exits with status 1. A number of
philosophers below 1 is reported on standard error, also with status 1.

The command runs in real time: one simulated microsecond takes one real
microsecond.

## Library use

```python
import sys
from philosim.simulation import Simulation

sim = Simulation(no_of_philos=2, philo_to_die=0, ttd_ms=300,
                 random_ttd_ms=0, out=sys.stdout, tick=0.0001)
dead = sim.run()
print(dead.name)
```

- `philosim.simulation.Simulation(no_of_philos, philo_to_die, ttd_ms,
  random_ttd_ms, out, tick)` holds the philosophers. `tick` is the
  number of real seconds one simulated microsecond takes. `run()` starts
  the threads, watches them, joins them and returns the `Philosopher`
  that died. `start_threads()`, `watch()` and `join_threads()` are the
  separate steps.
- `philosim.simulation.Philosopher(name)` has `name`,
  `idle_time_micros`, `total_time_lived_micros` (a `SafeInt`) and
  `is_deceased` (a `threading.Event`).
- `philosim.simulation.build_simulation(argv, out, rng)` builds a
  `Simulation` from a full command line, writing to `out` who will die
  and when; `rng` is a `random.Random` used for the random time.
- `philosim.simulation.main(argv)` is the command's entry point and
  returns the exit status.
- `philosim.args.check_args(argv)` returns the two arguments or raises
  `philosim.args.UsageError`, whose `usage` attribute holds the text
  from `usage_text(progname)`.
- `philosim.numparse.parse_prefix(text)` returns the leading integer and
  whether the whole string was read; `parse_int(text)` raises
  `ValueError` if anything follows the number. `is_space` and
  `is_digit` test single characters.
- `philosim.safeint.SafeInt` is a lock-guarded integer with `value()`
  and `increment(step)`.

## What it does not do

The philosophers take no forks, and do not eat or think: they only
sleep and count their lived time. Nothing is saved between runs. If the
philosopher named by `WP` does not exist, or is numbered above 10, no
one dies and the simulation runs until it is interrupted.

## Tests

```
pip install .[test]
pytest
```