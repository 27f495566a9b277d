"""Tests for the Typer command-line interface."""

import json
import logging
from pathlib import Path
from typing import Iterator

import pytest
from typer.testing import CliRunner

import ansi_color_picker.cli.picker as picker
from ansi_color_picker.cli.app import create_app
from ansi_color_picker.core.palette import PaletteRegistry
from ansi_color_picker.core.state import Position, SelectionState

runner = CliRunner()


@pytest.fixture
def launched(monkeypatch: pytest.MonkeyPatch) -> list[tuple[PaletteRegistry, SelectionState]]:
    """Record picker launches instead of entering the TUI."""
    calls: list[tuple[PaletteRegistry, SelectionState]] = []

    def fake_run_picker(registry: PaletteRegistry, state: SelectionState) -> SelectionState:
        calls.append((registry, state))
        return state

    monkeypatch.setattr(picker, "run_picker", fake_run_picker)
    return calls


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """The package logger, with handlers added by --log-file removed afterwards."""
    logger = logging.getLogger("ansi_color_picker")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


class TestPalettesCommand:
    """Tests for `palettes`."""

    def test_lists_default_categories(self) -> None:
        result = runner.invoke(create_app(), ["palettes"])
        assert result.exit_code == 0
        for name in ("All Colors", "Basic Colors", "Grayscale", "Yellow Scale"):
            assert name in result.output
        assert "232 233 234" in result.output

    def test_custom_palette(self, tmp_path: Path) -> None:
        path = tmp_path / "palette.json"
        path.write_text(json.dumps({"Mono": [0, 7, 15]}))
        result = runner.invoke(create_app(), ["palettes", "--palette", str(path)])
        assert result.exit_code == 0
        assert "Mono" in result.output
        assert "Grayscale" not in result.output

    def test_palette_from_environment(self, tmp_path: Path) -> None:
        path = tmp_path / "palette.json"
        path.write_text(json.dumps({"Env Colors": [1, 2]}))
        result = runner.invoke(create_app(), ["palettes"], env={"ANSI_COLOR_PICKER_PALETTE": str(path)})
        assert result.exit_code == 0
        assert "Env Colors" in result.output

    def test_bad_palette_exits_1(self, tmp_path: Path) -> None:
        path = tmp_path / "palette.json"
        path.write_text(json.dumps({"Empty": []}))
        result = runner.invoke(create_app(), ["palettes", "--palette", str(path)])
        assert result.exit_code == 1


class TestPickCommand:
    """Tests for `pick`, with the TUI replaced."""

    def test_starts_at_first_category(self, launched: list) -> None:
        result = runner.invoke(create_app(), ["pick"])
        assert result.exit_code == 0
        (registry, state), = launched
        assert len(registry) == 9
        assert state == SelectionState.initial()

    def test_start_category(self, launched: list) -> None:
        result = runner.invoke(create_app(), ["pick", "--category", "Grayscale"])
        assert result.exit_code == 0
        (registry, state), = launched
        expected = Position(registry.index_of("Grayscale"), 0)
        assert state.cursor == state.foreground == state.background == expected

    def test_unknown_category(self, launched: list) -> None:
        result = runner.invoke(create_app(), ["pick", "--category", "Nope"])
        assert result.exit_code == 1
        assert launched == []

    def test_invalid_palette_never_launches(self, launched: list, tmp_path: Path) -> None:
        path = tmp_path / "palette.json"
        path.write_text("{}")
        result = runner.invoke(create_app(), ["pick", "--palette", str(path)])
        assert result.exit_code == 1
        assert launched == []


class TestLogging:
    """Tests for --log-file and --log-level on `pick`."""

    def test_log_file_written(self, launched: list, package_logger: logging.Logger, tmp_path: Path) -> None:
        log_file = tmp_path / "picker.log"
        result = runner.invoke(create_app(), ["pick", "--log-file", str(log_file)])
        assert result.exit_code == 0
        assert "Loaded palette with 9 categories" in log_file.read_text()

    def test_log_file_from_environment(
        self, launched: list, package_logger: logging.Logger, tmp_path: Path
    ) -> None:
        log_file = tmp_path / "env.log"
        result = runner.invoke(create_app(), ["pick"], env={"ANSI_COLOR_PICKER_LOG": str(log_file)})
        assert result.exit_code == 0
        assert "Loaded palette" in log_file.read_text()

    def test_level_filters_records(self, launched: list, package_logger: logging.Logger, tmp_path: Path) -> None:
        log_file = tmp_path / "quiet.log"
        result = runner.invoke(create_app(), ["pick", "--log-file", str(log_file), "--log-level", "WARNING"])
        assert result.exit_code == 0
        assert package_logger.level == logging.WARNING
        assert "Loaded palette" not in log_file.read_text()

    def test_palette_error_is_logged(self, launched: list, package_logger: logging.Logger, tmp_path: Path) -> None:
        log_file = tmp_path / "error.log"
        result = runner.invoke(create_app(), ["pick", "--log-file", str(log_file), "--category", "Nope"])
        assert result.exit_code == 1
        assert "Palette configuration rejected" in log_file.read_text()

    def test_unknown_level_is_usage_error(self, launched: list, tmp_path: Path) -> None:
        result = runner.invoke(
            create_app(), ["pick", "--log-file", str(tmp_path / "x.log"), "--log-level", "verbose"]
        )
        assert result.exit_code == 2
        assert launched == []

    def test_unwritable_log_file(self, launched: list, package_logger: logging.Logger, tmp_path: Path) -> None:
        result = runner.invoke(create_app(), ["pick", "--log-file", str(tmp_path / "missing" / "picker.log")])
        assert result.exit_code == 1
        assert launched == []
        assert package_logger.handlers == []
