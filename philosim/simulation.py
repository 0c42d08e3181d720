"""A toy simulation of philosopher threads that live until one of them dies."""

from __future__ import annotations

import itertools
import random
import sys
import threading
import time
from collections.abc import Sequence
from typing import TextIO

from philosim.args import UsageError, check_args
from philosim.numparse import parse_prefix
from philosim.safeint import SafeInt

_BASE_IDLE_MICROS = 100000
_WATCH_PAUSE_MICROS = 100


class Philosopher:
    """One philosopher: a name, a pace of life and a lifetime counter."""

    def __init__(self, name: int) -> None:
        if name < 1:
            raise ValueError("philosopher names start from 1")
        self.name = name
        self.idle_time_micros = _BASE_IDLE_MICROS * (10 // name)
        self.total_time_lived_micros = SafeInt(0)
        self.is_deceased = threading.Event()
        self.thread: threading.Thread | None = None

    def __repr__(self) -> str:
        return f"Philosopher({self.name})"


class Simulation:
    """Runs one thread per philosopher and watches for the first death.

    ``tick`` is the number of real seconds that one simulated microsecond takes.
    """

    def __init__(
        self,
        no_of_philos: int,
        philo_to_die: int = 0,
        ttd_ms: int = 0,
        random_ttd_ms: int = 0,
        out: TextIO | None = None,
        tick: float = 1e-6,
    ) -> None:
        if no_of_philos < 1:
            raise ValueError("the number of philosophers must be at least 1")
        self.no_of_philos = no_of_philos
        self.philo_to_die = philo_to_die
        self.ttd_ms = ttd_ms
        self.random_ttd_ms = random_ttd_ms
        self.out = out if out is not None else sys.stdout
        self.tick = tick
        self.philos = [Philosopher(i) for i in range(1, no_of_philos + 1)]
        self._print_lock = threading.Lock()
        self._started = threading.Event()
        self._stopped = threading.Event()

    @property
    def is_running(self) -> bool:
        return self._started.is_set() and not self._stopped.is_set()

    def _say(self, text: str) -> None:
        with self._print_lock:
            self.out.write(text + "\n")
            self.out.flush()

    def life_cycle(self, philo: Philosopher) -> None:
        """Body of a philosopher thread: wait for the start, then live until stopped."""
        self._say(f"philo {philo.name} -- thread created, waiting for start")
        self._started.wait()
        self._say(
            f"philo {philo.name} -- NOW RUNNING "
            f"(idle time set to {philo.idle_time_micros} micro seconds)..."
        )
        while not self._stopped.is_set() and not philo.is_deceased.is_set():
            lived = philo.total_time_lived_micros.increment(philo.idle_time_micros)
            self._say(
                f"philo {philo.name} -- 'while loop' or 'living' AND "
                f"usleep-ing {philo.idle_time_micros} micro seconds "
                f"(ttl_micros = {lived})"
            )
            self._stopped.wait(philo.idle_time_micros * self.tick)
        self._say(f"philo {philo.name} -- thread ended!")

    def start_threads(self) -> None:
        """Create and start one thread per philosopher."""
        for philo in self.philos:
            philo.thread = threading.Thread(
                target=self.life_cycle,
                args=(philo,),
                name=f"philo-{philo.name}",
                daemon=True,
            )
            philo.thread.start()

    def join_threads(self) -> None:
        """Wait for every started philosopher thread to finish."""
        for philo in self.philos:
            if philo.thread is not None:
                philo.thread.join()

    def _should_die(self, philo: Philosopher) -> bool:
        lived = philo.total_time_lived_micros.value()
        if self.ttd_ms and lived >= self.ttd_ms * 1000:
            return True
        return bool(
            self.philo_to_die
            and philo.name == self.philo_to_die
            and lived >= self.random_ttd_ms * 1000
        )

    def watch(self) -> Philosopher:
        """Poll the philosophers in turn until one must die; mark it and stop."""
        for philo in itertools.cycle(self.philos):
            if self._should_die(philo):
                philo.is_deceased.set()
                self._stopped.set()
                return philo
            time.sleep(_WATCH_PAUSE_MICROS * self.tick)
        raise RuntimeError("no philosophers to watch")

    def run(self) -> Philosopher:
        """Run the whole simulation and return the philosopher that died."""
        self.start_threads()
        self._started.set()
        dead = self.watch()
        self._say(f"philo {dead.name} died!")
        self._say("Waiting to join all philo threads...")
        self.join_threads()
        self._say("All done, clean exit.")
        return dead


def build_simulation(
    argv: Sequence[str],
    out: TextIO | None = None,
    rng: random.Random | None = None,
) -> Simulation:
    """Build a simulation from a full argv, announcing who will die and when."""
    nop_arg, second_arg = check_args(argv)
    out = out if out is not None else sys.stdout
    no_of_philos, _ = parse_prefix(nop_arg)
    philo_to_die = 0
    ttd_ms = 0
    random_ttd_ms = 0
    if second_arg.startswith("-"):
        ttd_ms = -parse_prefix(second_arg)[0]
        out.write(f"A philosopher will die after {ttd_ms} ms have elapsed\n")
    else:
        philo_to_die, _ = parse_prefix(second_arg)
        rng = rng if rng is not None else random.Random()
        random_ttd_ms = (rng.randrange(10) + 1) * 1000
        out.write(
            f"Philosopher {philo_to_die} will die after {random_ttd_ms} ms "
            "(choosen randomly) have elapsed\n"
        )
    return Simulation(no_of_philos, philo_to_die, ttd_ms, random_ttd_ms, out=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; returns the process exit status."""
    argv = list(sys.argv if argv is None else argv)
    try:
        simulation = build_simulation(argv)
    except UsageError as exc:
        sys.stdout.write(exc.usage)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    simulation.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())