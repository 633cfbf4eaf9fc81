"""Tests for the racelog command line interface."""

import pytest

from racelog import cli
from racelog.config import AppConfig


def _feed_input(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


class TestConfig:
    """Test argument parsing into configuration."""
    
    def test_defaults(self):
        """No arguments leaves session fields to the prompts."""
        config = cli.build_config(cli.parse_args([]))
        
        assert config.driver_name is None
        assert config.vehicle_choice is None
        assert config.output.name == "report.txt"
        assert config.log_level == "WARNING"
        
    def test_string_paths_normalized(self):
        """String paths become Path objects."""
        config = AppConfig(output="out/report.txt", log_file="run.log", log_level="debug")
        
        assert config.output.parent.name == "out"
        assert config.log_file.name == "run.log"
        assert config.log_level == "DEBUG"
        
    def test_vehicle_choice_restricted(self):
        """--vehicle only accepts 1, 2 or 3."""
        with pytest.raises(SystemExit):
            cli.parse_args(["--vehicle", "4"])


class TestRun:
    """Test a full CLI run."""
    
    def test_non_interactive_run(self, tmp_path, capsys):
        """All inputs from flags produce laps, averages and a report."""
        output = tmp_path / "report.txt"
        
        code = cli.main([
            "--driver", "Ana", "--track", "Spa", "--vehicle", "2",
            "--seed", "42", "--output", str(output),
        ])
        
        assert code == 0
        out = capsys.readouterr().out
        assert "Welcome to Motorsports Simulator" in out
        assert "Lap 1:" in out and "Lap 3:" in out
        assert "Average Lap Time:" in out
        assert "Overall Average:" in out
        assert f"Report saved to {output}" in out
        
        lines = output.read_text().splitlines()
        assert lines[0].startswith("Driver")
        assert lines[1].startswith("Ana")
        assert "Formula" in lines[1]
        
    def test_session_and_overall_average_match(self, tmp_path, capsys):
        """With one session both averages are identical."""
        cli.main(["--driver", "A", "--track", "B", "--vehicle", "1",
                  "--seed", "5", "--output", str(tmp_path / "r.txt")])
        
        out = capsys.readouterr().out
        avg = out.split("Average Lap Time: ")[1].split(" ")[0]
        overall = out.split("Overall Average: ")[1].split(" ")[0]
        assert avg == overall
        assert 95.0 <= float(avg) <= 104.99
        
    def test_interactive_prompts(self, tmp_path, monkeypatch, capsys):
        """Missing flags are prompted for."""
        _feed_input(monkeypatch, ["Loeb", "Rally Finland", "3"])
        output = tmp_path / "report.txt"
        
        code = cli.run(AppConfig(seed=1, output=output))
        
        assert code == 0
        assert "3. Rally" in capsys.readouterr().out
        assert "Rally Finland" in output.read_text()
        
    @pytest.mark.parametrize("choice", ["7", "abc"])
    def test_invalid_vehicle_choice(self, tmp_path, monkeypatch, capsys, choice):
        """Bad menu choices exit with status 2 and no report."""
        _feed_input(monkeypatch, ["A", "B", choice])
        output = tmp_path / "report.txt"
        
        code = cli.run(AppConfig(output=output))
        
        assert code == 2
        assert "Invalid vehicle choice" in capsys.readouterr().out
        assert not output.exists()
