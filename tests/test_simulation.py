import io
import random

import pytest

from philosim.args import UsageError
from philosim.simulation import Philosopher, Simulation, build_simulation, main


def test_philosopher_idle_time_from_name():
    assert Philosopher(1).idle_time_micros == 1000000
    assert Philosopher(10).idle_time_micros == 100000


def test_philosopher_starts_alive_with_no_time():
    philo = Philosopher(2)
    assert philo.total_time_lived_micros.value() == 0
    assert philo.is_deceased.is_set() is False


def test_simulation_needs_a_philosopher():
    with pytest.raises(ValueError):
        Simulation(0)


def test_watch_detects_ttd_without_threads():
    sim = Simulation(3, ttd_ms=5, out=io.StringIO(), tick=1e-9)
    sim.philos[1].total_time_lived_micros.increment(5000)
    dead = sim.watch()
    assert dead is sim.philos[1]
    assert dead.is_deceased.is_set()
    assert sim.is_running is False


def test_watch_only_kills_chosen_philosopher():
    sim = Simulation(3, philo_to_die=3, random_ttd_ms=1, out=io.StringIO(), tick=1e-9)
    for philo in sim.philos:
        philo.total_time_lived_micros.increment(1000)
    dead = sim.watch()
    assert dead.name == 3
    assert [p.is_deceased.is_set() for p in sim.philos] == [False, False, True]


def test_build_simulation_with_time_to_die():
    out = io.StringIO()
    sim = build_simulation(["philo", "2", "-300"], out=out)
    assert sim.no_of_philos == 2
    assert sim.ttd_ms == 300
    assert sim.philo_to_die == 0
    assert out.getvalue() == "A philosopher will die after 300 ms have elapsed\n"


def test_build_simulation_with_chosen_philosopher():
    out = io.StringIO()
    sim = build_simulation(["philo", "4", "2"], out=out, rng=random.Random(0))
    assert sim.philo_to_die == 2
    assert sim.random_ttd_ms % 1000 == 0
    assert 1000 <= sim.random_ttd_ms <= 10000
    assert out.getvalue().startswith("Philosopher 2 will die after ")
    assert "(choosen randomly) have elapsed" in out.getvalue()


def test_build_simulation_wrong_args():
    with pytest.raises(UsageError):
        build_simulation(["philo", "2"], out=io.StringIO())


def test_run_with_time_to_die():
    out = io.StringIO()
    sim = Simulation(2, ttd_ms=300, out=out, tick=1e-8)
    dead = sim.run()
    assert dead.total_time_lived_micros.value() >= 300 * 1000
    text = out.getvalue()
    assert f"philo {dead.name} died!\n" in text
    assert text.endswith("All done, clean exit.\n")
    assert text.count("-- thread ended!") == 2
    assert all(not p.thread.is_alive() for p in sim.philos)


def test_run_with_chosen_philosopher():
    out = io.StringIO()
    sim = Simulation(3, philo_to_die=2, random_ttd_ms=1000, out=out, tick=1e-8)
    dead = sim.run()
    assert dead.name == 2
    assert "Waiting to join all philo threads...\n" in out.getvalue()
    assert out.getvalue().count("thread created, waiting for start") == 3


def test_main_usage(capsys):
    assert main(["philo"]) == 1
    assert "Usage: philo NOP WP|TTD" in capsys.readouterr().out


def test_main_runs(capsys):
    assert main(["philo", "1", "-100"]) == 0
    captured = capsys.readouterr().out
    assert "A philosopher will die after 100 ms have elapsed\n" in captured
    assert "philo 1 died!\n" in captured


def test_main_rejects_no_philosophers(capsys):
    assert main(["philo", "0", "-100"]) == 1
    assert "error:" in capsys.readouterr().err