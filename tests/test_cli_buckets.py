"""Tests for repository and bucket lifecycle commands."""

from pathlib import Path

import yaml

from buckets.__main__ import cli


def test_version(cli_runner) -> None:
    result = cli_runner.invoke(cli, ["version"])
    assert result.exit_code == 0
    assert result.output == "bucket version 0.1.0\n"


def test_init_then_info_from_subdirectory(workdir: Path, cli_runner, monkeypatch) -> None:
    result = cli_runner.invoke(cli, ["init", "myrepo"])
    assert result.exit_code == 0
    assert "Initialised bucket repository" in result.output

    nested = workdir / "myrepo" / "sub"
    nested.mkdir()
    monkeypatch.chdir(nested)

    info_result = cli_runner.invoke(cli, ["info"])
    assert info_result.exit_code == 0
    assert "Found repository" in info_result.output
    assert "top level directory of repository: myrepo" in info_result.output


def test_init_existing_directory_fails(workdir: Path, cli_runner) -> None:
    (workdir / "myrepo").mkdir()
    result = cli_runner.invoke(cli, ["init", "myrepo"])
    assert result.exit_code != 0
    assert "Directory already exists" in result.output


def test_info_outside_repository(workdir: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["info"])
    assert result.exit_code != 0
    assert "Not a repository" in result.output


def test_create_bucket(workdir: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["create", "demo"])

    assert result.exit_code == 0
    assert "Bucket created" in result.output
    config = workdir / "demo" / ".b" / "config.yaml"
    assert yaml.safe_load(config.read_text(encoding="utf-8")) == {"name": "demo"}


def test_create_requires_name(workdir: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["create"])
    assert result.exit_code != 0


def test_create_existing_bucket_fails(workdir: Path, cli_runner) -> None:
    cli_runner.invoke(cli, ["create", "demo"])
    result = cli_runner.invoke(cli, ["create", "demo"])
    assert result.exit_code != 0
    assert "Bucket already exists" in result.output


def test_rename_bucket(workdir: Path, cli_runner) -> None:
    cli_runner.invoke(cli, ["create", "demo"])

    result = cli_runner.invoke(cli, ["rename", "demo", "garden"])

    assert result.exit_code == 0
    assert "Bucket renamed" in result.output
    config = workdir / "garden" / ".b" / "config.yaml"
    assert yaml.safe_load(config.read_text(encoding="utf-8")) == {"name": "garden"}


def test_rename_requires_new_name(workdir: Path, cli_runner) -> None:
    cli_runner.invoke(cli, ["create", "demo"])
    result = cli_runner.invoke(cli, ["rename", "demo"])
    assert result.exit_code != 0


def test_rename_non_bucket_fails(workdir: Path, cli_runner) -> None:
    (workdir / "plain").mkdir()
    result = cli_runner.invoke(cli, ["rename", "plain", "other"])
    assert result.exit_code != 0
    assert "missing .b directory" in result.output
