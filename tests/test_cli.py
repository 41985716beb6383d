"""Tests for the spherekit command-line interface."""
import json
import math

import pytest
from click.testing import CliRunner

from spherekit import __version__
from spherekit.cli import cli, main
from spherekit.config import Config


@pytest.fixture
def runner():
    return CliRunner()


def lines(result):
    return result.output.strip().splitlines()


class TestConversionCommands:
    """Test the coordinate conversion commands."""

    def test_to_cartesian(self, runner):
        result = runner.invoke(cli, ["to-cartesian", "1", "0", "1.5707963267948966"])
        assert result.exit_code == 0, result.output
        assert lines(result) == ["x: 1.000000", "y: 0.000000", "z: 0.000000"]

    def test_to_cartesian_negative_radius(self, runner):
        result = runner.invoke(cli, ["to-cartesian", "-1", "0", "1.5707963267948966"])
        assert result.exit_code == 0, result.output
        assert lines(result)[0] == "x: -1.000000"

    def test_from_cartesian_origin(self, runner):
        result = runner.invoke(cli, ["from-cartesian", "0", "0", "0"])
        assert result.exit_code == 0, result.output
        assert lines(result) == ["radius: 0.000000", "theta: 0.000000", "phi: 0.000000"]

    def test_from_cartesian_json(self, runner):
        result = runner.invoke(
            cli, ["--format", "json", "from-cartesian", "-1", "-1", "-1"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["radius"] == pytest.approx(math.sqrt(3), abs=1e-6)
        assert data["theta"] == pytest.approx(-3 * math.pi / 4, abs=1e-6)

    def test_nan_argument(self, runner):
        result = runner.invoke(cli, ["to-cartesian", "nan", "0", "0"])
        assert result.exit_code == 0, result.output
        assert lines(result) == ["x: nan", "y: nan", "z: nan"]


class TestFormulaCommands:
    """Test the measurement commands."""

    @pytest.mark.parametrize("args,expected", [
        (["surface-area", "2"], "surface_area: 50.265482"),
        (["volume", "1"], "volume: 4.188790"),
        (["cap", "2", "1"], "cap_area: 12.566371"),
        (["zone", "1", "0", "0.5"], "zone_area: 3.141593"),
        (["segment-volume", "1", "0.5"], "segment_volume: 0.654498"),
        (["sector-volume", "1", "1.5707963267948966"], "sector_volume: 2.094395"),
    ])
    def test_formula(self, runner, args, expected):
        result = runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        assert lines(result) == [expected]

    def test_distance_with_precision(self, runner):
        result = runner.invoke(
            cli, ["--precision", "10", "distance", "1", "0", "0", "3.141592653589793", "0"]
        )
        assert result.exit_code == 0, result.output
        assert lines(result) == ["distance: 3.1415926536"]

    def test_volume_nan(self, runner):
        result = runner.invoke(cli, ["volume", "nan"])
        assert lines(result) == ["volume: nan"]

    def test_json_nan_written_as_null(self, runner):
        result = runner.invoke(cli, ["--format", "json", "to-cartesian", "nan", "0", "0"])
        assert result.exit_code == 0, result.output
        assert "NaN" not in result.output
        assert json.loads(result.output) == {"x": None, "y": None, "z": None}

    def test_json_output(self, runner):
        result = runner.invoke(cli, ["--format", "json", "surface-area", "2"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"surface_area": round(16 * math.pi, 6)}


class TestConfigCommands:
    """Test configuration handling in the CLI."""

    def test_config_file_sets_precision(self, runner, tmp_path):
        path = tmp_path / "spherekit.yaml"
        path.write_text("output:\n  precision: 2\n")
        result = runner.invoke(cli, ["-c", str(path), "cap", "2", "1"])
        assert result.exit_code == 0, result.output
        assert lines(result) == ["cap_area: 12.57"]

    def test_option_overrides_config_file(self, runner, tmp_path):
        path = tmp_path / "spherekit.toml"
        path.write_text("[output]\nprecision = 2\n")
        result = runner.invoke(cli, ["-c", str(path), "--precision", "4", "cap", "2", "1"])
        assert lines(result) == ["cap_area: 12.5664"]

    def test_invalid_config_file(self, runner, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[output]\nunknown = 1\n")
        result = runner.invoke(cli, ["-c", str(path), "volume", "1"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_init_writes_default_config(self, runner, tmp_path):
        path = tmp_path / "nested" / "spherekit.toml"
        result = runner.invoke(cli, ["init", "-o", str(path)])
        assert result.exit_code == 0, result.output
        assert Config.from_file(path) == Config()

    def test_init_refuses_to_overwrite(self, runner, tmp_path):
        path = tmp_path / "spherekit.yaml"
        path.write_text("")
        result = runner.invoke(cli, ["init", "--format", "yaml", "-o", str(path)])
        assert result.exit_code == 1
        assert "already exists" in result.output

        result = runner.invoke(cli, ["init", "--format", "yaml", "-o", str(path), "--force"])
        assert result.exit_code == 0, result.output
        assert Config.from_file(path) == Config()

    def test_config_show(self, runner):
        result = runner.invoke(cli, ["--precision", "3", "config", "show"])
        assert result.exit_code == 0, result.output
        assert "precision: 3" in result.output

    def test_config_validate(self, runner, tmp_path):
        good = tmp_path / "good.toml"
        good.write_text("[logging]\nlevel = \"debug\"\n")
        result = runner.invoke(cli, ["config", "validate", str(good)])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output

        bad = tmp_path / "bad.toml"
        bad.write_text("[logging]\nlevel = \"loud\"\n")
        result = runner.invoke(cli, ["config", "validate", str(bad)])
        assert result.exit_code == 1


class TestMiscCommands:
    """Test informational commands."""

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_info(self, runner):
        result = runner.invoke(cli, ["info"])
        assert result.exit_code == 0, result.output
        assert "NumPy" in result.output

    def test_info_reports_installed_versions(self, runner):
        from importlib.metadata import version

        result = runner.invoke(cli, ["info"])
        assert f"Click: {version('click')}" in result.output


class TestMain:
    """Test the console-script entry point."""

    def test_success_returns_zero(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["spherekit", "volume", "1"])
        assert main() == 0
        assert "volume: 4.188790" in capsys.readouterr().out

    def test_version_returns_zero(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["spherekit", "--version"])
        assert main() == 0
        assert __version__ in capsys.readouterr().out

    def test_click_error_returns_exit_code(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[output]\nunknown = 1\n")
        monkeypatch.setattr("sys.argv", ["spherekit", "-c", str(path), "volume", "1"])
        assert main() == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_usage_error_returns_two(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["spherekit", "volume"])
        assert main() == 2
