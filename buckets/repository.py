"""Bucket repositories: a directory tree marked by a ``.buckets`` directory."""

from __future__ import annotations

from pathlib import Path

from buckets.constants import REPOSITORY_CONFIG_FILENAME, REPOSITORY_DIRNAME
from buckets.errors import NotARepositoryError, RepositoryExistsError


def repository_config_text(name: str) -> str:
    return f"top level directory of repository: {name}"


def init_repository(parent: Path, name: str) -> Path:
    repo_root = parent / name
    if repo_root.exists():
        raise RepositoryExistsError(repo_root)
    marker = repo_root / REPOSITORY_DIRNAME
    marker.mkdir(parents=True, mode=0o755)
    (marker / REPOSITORY_CONFIG_FILENAME).write_text(
        repository_config_text(name), encoding="utf-8"
    )
    return repo_root


def find_repository_root(start: Path) -> Path:
    """Walk upward from ``start`` until a directory holding ``.buckets`` is found."""
    current = start.resolve()
    for candidate in (current, *current.parents):
        if (candidate / REPOSITORY_DIRNAME).is_dir():
            return candidate
    raise NotARepositoryError(start)


def read_repository_info(start: Path) -> tuple[Path, str]:
    root = find_repository_root(start)
    config_path = root / REPOSITORY_DIRNAME / REPOSITORY_CONFIG_FILENAME
    try:
        return root, config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise NotARepositoryError(config_path) from exc
