from pathlib import Path

import pytest
from typer.testing import CliRunner

from countrypick import main as main_module
from countrypick.main import cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def keep_collation(monkeypatch):
    monkeypatch.setattr(main_module, "configure_collation", lambda: None)


@pytest.fixture
def names_file(tmp_path: Path, countries) -> Path:
    path = tmp_path / "countries.txt"
    path.write_text("\n".join(countries + ["Chad", "  "]), encoding="utf-8")
    return path


def test_suggest_prints_matches(names_file: Path):
    result = runner.invoke(cli, ["suggest", "ch", "--names-file", str(names_file), "--locale", "en_US"])

    assert result.exit_code == 0, result.output
    assert "Chad" in result.output
    assert "China" in result.output
    assert "Canada" not in result.output


def test_suggest_without_matches_exits_nonzero(names_file: Path):
    result = runner.invoke(cli, ["suggest", "Canada", "-f", str(names_file), "-l", "en_US"])

    assert result.exit_code == 1
    assert "No suggestions" in result.output


def test_names_lists_clean_pool(names_file: Path, countries):
    result = runner.invoke(cli, ["names", "-f", str(names_file), "-l", "en_US"])

    assert result.exit_code == 0, result.output
    assert f"{len(countries)} name(s)" in result.output


def test_unknown_locale_is_a_usage_error(names_file: Path):
    result = runner.invoke(cli, ["suggest", "ch", "-f", str(names_file), "-l", "zz"])

    assert result.exit_code == 2


def test_missing_names_file_is_a_usage_error(tmp_path: Path):
    result = runner.invoke(cli, ["names", "-f", str(tmp_path / "nope.txt"), "-l", "en_US"])

    assert result.exit_code == 2
