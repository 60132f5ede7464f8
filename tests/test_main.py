import csv
import logging

import main
from Simulation import Simulation


def test_parse_args_defaults():
    args = main.parse_args([])
    assert not args.headless
    assert args.seed is None


def test_headless_run_writes_population_log(tmp_path, capsys):
    path = tmp_path / "population.csv"
    main.main(["--headless", "--ticks", "25", "--width", "120", "--height", "80",
               "--tile-size", "10", "--floor", "5", "--seed", "7", "--log-path", str(path)])
    with open(path, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["tick", "population"]
    assert [r[0] for r in rows[1:]] == ["10", "20"]
    assert all(int(r[1]) >= 5 for r in rows[1:])
    assert "Tick: 25" in capsys.readouterr().out


def test_caption_shows_pause(rng, soil_grid):
    sim = Simulation(soil_grid, population_floor=3, rng=rng)
    assert "Population: 3" in main.caption(sim)
    sim.toggle_pause()
    assert main.caption(sim).endswith("[PAUSED]")


def test_population_log_writes_header_once(tmp_path, rng, soil_grid):
    path = tmp_path / "log.csv"
    log = main.PopulationLog(str(path))
    sim = Simulation(soil_grid, population_floor=2, rng=rng)
    for _ in range(30):
        sim.update()
        log.record(sim)
    with open(path, newline="") as f:
        rows = list(csv.reader(f))
    assert rows.count(["tick", "population"]) == 1
    assert [r[0] for r in rows[1:]] == ["10", "20", "30"]


def test_startup_logs_network_size(caplog):
    caplog.set_level(logging.INFO, logger="creatures")
    main.main(["--headless", "--ticks", "1", "--width", "60", "--height", "60",
               "--tile-size", "10", "--floor", "1", "--seed", "3"])
    assert "200 edges" in caplog.text
