"""Tests for the command-line interface."""

import json

import pytest
from euler_orbits.cli.main import main
from euler_orbits.io.record_writer import read_records


def test_prints_one_record_per_step(capsys):
    """Test records go to stdout, six fields each."""
    assert main(["symplectic", "--steps", "5"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert all(len(line.split("\t")) == 6 for line in lines)
    assert lines[0].split("\t")[0] == "0.0"


def test_invalid_method_is_usage_error(capsys):
    """Test unknown method exits non-zero with no output."""
    with pytest.raises(SystemExit) as excinfo:
        main(["rk4"])

    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "rk4" in captured.err


def test_missing_method_is_usage_error(capsys):
    """Test the method argument is required."""
    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code != 0
    assert capsys.readouterr().out == ""


def test_invalid_config_produces_no_records(tmp_path, capsys):
    """Test a rejected time step exits 1 before writing anything."""
    output = tmp_path / "positions.csv"

    assert main(["naive", "--dt", "0", "--output", str(output)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid configuration" in captured.err
    assert not output.exists()


def test_output_file_and_state(tmp_path, capsys):
    """Test records, final state and summary land where requested."""
    output = tmp_path / "positions_naive.csv"
    state = tmp_path / "final.json"

    code = main(["naive", "--steps", "24", "--output", str(output),
                 "--save-state", str(state), "--summary"])

    assert code == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[final]" in captured.err
    assert len(read_records(output)) == 24
    saved = json.loads(state.read_text())
    assert saved["metadata"]["steps"] == 24
    assert saved["metadata"]["method"] == "naive"
    assert [body["name"] for body in saved["bodies"]] == ["Earth", "Moon"]


def test_config_file(tmp_path, capsys):
    """Test config file values apply and flags override them."""
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"step_count": 7, "time_step": 60.0}))

    assert main(["naive", "--config", str(config)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    assert lines[-1].split("\t")[0] == "360.0"

    assert main(["naive", "--config", str(config), "--steps", "3"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 3


def test_plot_and_compare(tmp_path, capsys):
    """Test trajectory and comparison plots are written."""
    prefix = str(tmp_path / "run")

    assert main(["symplectic", "--steps", "24", "--plot", prefix]) == 0
    assert (tmp_path / "run_trajectories.png").exists()
    assert len(capsys.readouterr().out.splitlines()) == 24

    assert main(["naive", "--steps", "24", "--compare", prefix]) == 0
    assert (tmp_path / "run_distances.png").exists()
    assert capsys.readouterr().out == ""


def test_three_body_preset(capsys):
    """Test the Sun-Earth-Moon preset runs from the CLI."""
    assert main(["symplectic", "--preset", "sun_earth_moon", "--steps", "10"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 10


def test_unknown_preset_in_config(tmp_path, capsys):
    """Test a bad preset name from a config file is a configuration error."""
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"preset": "jupiter"}))

    assert main(["naive", "--config", str(config)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "jupiter" in captured.err


@pytest.mark.parametrize("contents", [
    {"time_step": "fast"},
    {"step_count": 2.9},
    {"step_count": True},
    {"preset": None},
])
def test_bad_config_values_exit_cleanly(tmp_path, capsys, contents):
    """Test ill-typed config values exit 1 with a message and no records."""
    config = tmp_path / "config.json"
    config.write_text(json.dumps(contents))

    assert main(["naive", "--config", str(config)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid configuration" in captured.err


def test_unreadable_config_file_exits_cleanly(tmp_path, capsys):
    """Test missing and malformed config files exit 1."""
    assert main(["naive", "--config", str(tmp_path / "missing.json")]) == 1
    assert "Invalid configuration" in capsys.readouterr().err

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    assert main(["naive", "--config", str(broken)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid configuration" in captured.err


@pytest.mark.parametrize("flag", ["--output", "--plot", "--save-state"])
def test_compare_rejects_per_run_outputs(tmp_path, capsys, flag):
    """Test --compare refuses options it would otherwise ignore."""
    with pytest.raises(SystemExit) as excinfo:
        main(["naive", "--compare", str(tmp_path / "cmp"), flag, str(tmp_path / "x.json")])

    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert flag in captured.err
    assert not (tmp_path / "cmp_distances.png").exists()
