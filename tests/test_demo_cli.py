# tests/test_demo_cli.py
import argparse
import json

from apps.cli.demo_cli import builtin_grid, main, run
from solver.config import load_config


def test_builtin_grids_are_fresh_copies():
    g = builtin_grid("demo")
    g[0][0] = 0
    assert builtin_grid("demo")[0][0] == 5
    assert builtin_grid("blank") == [[0] * 9 for _ in range(9)]


def test_run_demo():
    payload = run("demo", load_config())
    assert payload["valid"] and payload["solved"]
    assert payload["filled_count"] == 51
    assert payload["text"].startswith("+-------")


def test_run_unsolvable():
    payload = run("unsolvable", load_config())
    assert payload["valid"]
    assert not payload["solved"]
    assert payload["grid"] == payload["original"]


def test_main_prints_json(capsys):
    args = argparse.Namespace(mode="blank", config=None, log_level="WARNING", pretty=False)
    assert main(args) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["solved"] is True
    assert out["filled_count"] == 81
