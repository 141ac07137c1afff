import io

import pytest

from acequia.simulator import main, run

VALUES = "Max Simulation Time\n60\nRandom Values\nNorth,53,49,55\nSouth,40,39,45\nEast,25,26,50\n"


@pytest.fixture
def values_file(tmp_path):
    path = tmp_path / "RandomValues.dat"
    path.write_text(VALUES)
    return path


def test_run_reports_state_and_leaderboard(values_file):
    out = io.StringIO()
    manager = run(values_file, out)
    text = out.getvalue()
    assert "Current State: \n" in text
    assert "Leaderboard: \n" in text
    assert "StudentSolution:" in text
    assert list(manager.leaderboard) == ["StudentSolution"]


def test_run_ends_solved_or_at_limit(values_file):
    manager = run(values_file, io.StringIO())
    assert manager.simulation_max == 60
    assert manager.is_solved or manager.hour == manager.simulation_max


def test_run_report_matches_solved_state(values_file):
    out = io.StringIO()
    manager = run(values_file, out)
    if manager.is_solved:
        expected = f"Time solved = {manager.solved_time}\n"
    else:
        expected = "Not all regions were solved in time.\n"
    assert expected in out.getvalue()


def test_run_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        run(tmp_path / "missing.dat", io.StringIO())


def test_main_success(values_file, capsys):
    assert main([str(values_file)]) == 0
    assert "Leaderboard: " in capsys.readouterr().out


def test_main_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing.dat")]) == 1
    assert "execution failed!" in capsys.readouterr().err