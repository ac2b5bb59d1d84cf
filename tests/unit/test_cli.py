"""Unit tests for the command-line interface."""

import pytest

from table_presplit.cli.main import main


def test_splits_command(capsys):
    assert main(["splits", "3"]) == 0
    assert capsys.readouterr().out.splitlines() == ["000001", "000002", "000003"]


def test_splits_command_rejects_zero(capsys):
    assert main(["splits", "0"]) == 2
    assert "greater than 0" in capsys.readouterr().err


def test_plan_from_flags(capsys):
    code = main(["plan", "--table", "T1", "--splits", "2", "--option", "key1=v1"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Table: T1" in out
    assert "Column families: cf" in out
    assert "key1 = v1" in out
    assert "Regions: 3" in out
    assert "0: [-inf, 000001)" in out
    assert "2: [000002, +inf)" in out


def test_plan_from_config_with_override(tmp_path, capsys):
    path = tmp_path / "table.toml"
    path.write_text(
        '[table]\nname = "FROM_FILE"\nsplit_count = 5\n\n[table.options]\nk = "file"\n',
        encoding="utf-8",
    )

    code = main(["plan", "--config", str(path), "--splits", "1", "--option", "k=flag"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Table: FROM_FILE" in out
    assert "k = flag" in out
    assert "Regions: 2" in out


def test_plan_requires_table_and_splits(capsys):
    assert main(["plan", "--table", "T1"]) == 2
    assert "--splits" in capsys.readouterr().err


def test_plan_missing_config(tmp_path, capsys):
    assert main(["plan", "--config", str(tmp_path / "nope.toml")]) == 2
    assert "not found" in capsys.readouterr().err


def test_malformed_option_exits():
    with pytest.raises(SystemExit):
        main(["plan", "--table", "T1", "--splits", "1", "--option", "novalue"])


def test_plan_config_is_directory(tmp_path, capsys):
    assert main(["plan", "--config", str(tmp_path)]) == 2
    assert "not a file" in capsys.readouterr().err


def test_plan_config_nested_option_table(tmp_path, capsys):
    path = tmp_path / "table.toml"
    path.write_text(
        '[table]\nname = "T1"\nsplit_count = 2\n\n[table.options.k]\nx = 1\n',
        encoding="utf-8",
    )

    assert main(["plan", "--config", str(path)]) == 2
    assert "table.options.k" in capsys.readouterr().err


def test_plan_config_options_not_a_table(tmp_path, capsys):
    path = tmp_path / "table.toml"
    path.write_text(
        '[table]\nname = "T1"\nsplit_count = 2\noptions = "oops"\n',
        encoding="utf-8",
    )

    assert main(["plan", "--config", str(path)]) == 2
    assert "table.options" in capsys.readouterr().err
