"""Smoke tests for the Typer CLI."""

from pathlib import Path

from typer.testing import CliRunner

from volgen.cli import app

FIXTURES = Path(__file__).parent / "fixtures"

runner = CliRunner()


class TestGenerateCommand:
    def test_generate_with_fixed_start(self) -> None:
        result = runner.invoke(
            app,
            [
                "generate",
                "--start", "2022-01-01T00:00:00.000+00:00",
                "-n", "1000",
                "-d", "1m",
                "--seed", "7",
                "--log-level", "WARNING",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Generation Summary" in result.output
        assert "2022-01-01T00:00:00+00:00" in result.output

    def test_generate_from_config_file(self) -> None:
        result = runner.invoke(
            app,
            ["generate", "-c", str(FIXTURES / "stdout_test.toml"), "--seed", "1", "--histogram"],
        )
        assert result.exit_code == 0, result.output
        assert "early_fill" in result.output
        assert "rows=" in result.output

    def test_unknown_model_exits_1(self) -> None:
        result = runner.invoke(app, ["generate", "-m", "bogus", "-d", "1m"])
        assert result.exit_code == 1
        assert "Unknown distribution model" in result.output

    def test_zero_duration_exits_1(self) -> None:
        result = runner.invoke(app, ["generate", "-d", "10x"])
        assert result.exit_code == 1
        assert "at least 1 second" in result.output

    def test_huge_duration_exits_1(self) -> None:
        result = runner.invoke(app, ["generate", "-d", "99999999999d"])
        assert result.exit_code == 1
        assert "failed to parse time duration" in result.output

    def test_bad_timestamp_exits_1(self) -> None:
        result = runner.invoke(app, ["generate", "--start", "yesterday"])
        assert result.exit_code == 1
        assert "failed to parse start_timestamp" in result.output


class TestOtherCommands:
    def test_list_models(self) -> None:
        result = runner.invoke(app, ["list-models"])
        assert result.exit_code == 0
        for name in ("even", "early_fill", "sparse_fill"):
            assert name in result.output

    def test_show_config(self) -> None:
        result = runner.invoke(app, ["show-config", "-c", str(FIXTURES / "stdout_test.toml")])
        assert result.exit_code == 0, result.output
        assert '"number_of_entries": 1000' in result.output
        assert '"exporter"' in result.output

    def test_show_config_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["show-config", "-c", str(tmp_path / "nope.toml")])
        assert result.exit_code == 1
