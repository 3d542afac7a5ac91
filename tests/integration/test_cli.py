"""End-to-end tests for the polylab command line."""

from pathlib import Path

import pytest
from PIL import Image
from typer.testing import CliRunner

from polylab import __version__
from polylab.cli import app


@pytest.fixture
def runner() -> CliRunner:
    """Typer CLI runner."""
    return CliRunner()


class TestPropertiesCommand:
    """Tests for `polylab properties`."""

    def test_hexagon(self, runner: CliRunner) -> None:
        """Test properties of a hexagon with side 2."""
        result = runner.invoke(app, ["properties", "6", "--side-length", "2"])
        assert result.exit_code == 0, result.output
        assert "Hexagon" in result.output
        assert "120.00°" in result.output
        assert "12.000" in result.output
        assert "10.392" in result.output

    def test_not_a_polygon(self, runner: CliRunner) -> None:
        """Test fewer than three sides exits with an error."""
        result = runner.invoke(app, ["properties", "2"])
        assert result.exit_code == 1
        assert "Not a polygon" in result.output


class TestSolveCommand:
    """Tests for `polylab solve`."""

    def test_from_perimeter(self, runner: CliRunner) -> None:
        """Test solving from a perimeter."""
        result = runner.invoke(app, ["solve", "5", "10", "--from", "perimeter"])
        assert result.exit_code == 0, result.output
        assert "side length 2.000" in result.output
        assert "Pentagon" in result.output

    def test_from_area(self, runner: CliRunner) -> None:
        """Test solving a unit square from its area."""
        result = runner.invoke(app, ["solve", "4", "9", "--from", "area"])
        assert result.exit_code == 0, result.output
        assert "side length 3.000" in result.output

    def test_invalid_quantity(self, runner: CliRunner) -> None:
        """Test unknown quantity names are rejected."""
        result = runner.invoke(app, ["solve", "5", "1", "--from", "volume"])
        assert result.exit_code == 1
        assert "Invalid quantity" in result.output

    def test_not_a_polygon(self, runner: CliRunner) -> None:
        """Test fewer than three sides exits with an error."""
        result = runner.invoke(app, ["solve", "2", "4", "--from", "perimeter"])
        assert result.exit_code == 1
        assert "Not a polygon" in result.output

    def test_draws_calculator_scene(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test --output writes the solved polygon."""
        output = tmp_path / "calc.png"
        result = runner.invoke(app, ["solve", "6", "1", "--from", "side", "-o", str(output)])
        assert result.exit_code == 0, result.output
        assert output.exists()


class TestDrawCommand:
    """Tests for `polylab draw`."""

    def test_intro_scene(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test drawing the intro scene to a PNG."""
        output = tmp_path / "hexagon.png"
        result = runner.invoke(app, ["draw", "6", "--size", "300", "-o", str(output)])
        assert result.exit_code == 0, result.output
        with Image.open(output) as image:
            assert image.size == (300, 300)
            assert image.getpixel((150, 150)) == (0, 0, 0, 255)

    def test_explorer_with_background(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test the explorer scene with an opaque background."""
        output = tmp_path / "octagon.png"
        result = runner.invoke(
            app,
            ["draw", "8", "-s", "explorer", "-l", "0.5", "-b", "white", "-o", str(output)],
        )
        assert result.exit_code == 0, result.output
        with Image.open(output) as image:
            assert image.getpixel((0, 0)) == (255, 255, 255, 255)

    def test_invalid_scene(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test unknown scenes are rejected."""
        result = runner.invoke(app, ["draw", "6", "--scene", "quiz", "-o", str(tmp_path / "x.png")])
        assert result.exit_code == 1
        assert "Invalid scene" in result.output

    def test_unsupported_output(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test unsupported image formats exit with an error."""
        result = runner.invoke(app, ["draw", "6", "-o", str(tmp_path / "x.jpg")])
        assert result.exit_code == 1
        assert "Could not save image" in result.output

    def test_not_a_polygon(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test fewer than three sides exits before drawing."""
        output = tmp_path / "nothing.png"
        result = runner.invoke(app, ["draw", "1", "-o", str(output)])
        assert result.exit_code == 1
        assert not output.exists()


class TestArtCommand:
    """Tests for `polylab art`."""

    def test_seeded_art_is_repeatable(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test the same seed produces the same image."""
        first = tmp_path / "a.png"
        second = tmp_path / "b.png"
        assert runner.invoke(app, ["art", "-n", "4", "--seed", "3", "-o", str(first)]).exit_code == 0
        assert runner.invoke(app, ["art", "-n", "4", "--seed", "3", "-o", str(second)]).exit_code == 0

        with Image.open(first) as a, Image.open(second) as b:
            assert a.tobytes() == b.tobytes()

    def test_quiet(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test quiet mode prints nothing on success."""
        output = tmp_path / "art.png"
        result = runner.invoke(app, ["--quiet", "art", "-o", str(output)])
        assert result.exit_code == 0
        assert result.output.strip() == ""
        assert output.exists()


class TestGlobalOptions:
    """Tests for options shared by all commands."""

    def test_version(self, runner: CliRunner) -> None:
        """Test --version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test --log-file records rendering events."""
        log_file = tmp_path / "polylab.log"
        output = tmp_path / "tri.png"
        result = runner.invoke(
            app, ["--log-file", str(log_file), "draw", "3", "-o", str(output)]
        )
        assert result.exit_code == 0, result.output
        contents = log_file.read_text(encoding="utf-8")
        assert "Scene rendered" in contents
        assert "Image saved" in contents

    def test_log_level_is_case_insensitive(self, runner: CliRunner) -> None:
        """Test log levels are accepted in lower case."""
        result = runner.invoke(app, ["--log-level", "error", "properties", "5"])
        assert result.exit_code == 0, result.output
        assert "Pentagon" in result.output

    def test_invalid_log_level(self, runner: CliRunner) -> None:
        """Test an unknown log level is a usage error, not a crash."""
        result = runner.invoke(app, ["--log-level", "LOUD", "properties", "5"])
        assert result.exit_code == 2
        assert not isinstance(result.exception, AttributeError)
        assert "Invalid value" in result.output

    def test_summary_after_save(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test a run that writes an image ends with its render summary."""
        output = tmp_path / "square.png"
        result = runner.invoke(app, ["draw", "4", "-o", str(output)])
        assert result.exit_code == 0, result.output
        assert "Complete" in result.output
        assert "1 rendered" in result.output
        assert "1 saved" in result.output
        assert "0 errors" in result.output
