import sys
from pathlib import Path

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("BUCKET_DIR", raising=False)
    return tmp_path


@pytest.fixture
def demo_bucket(tmp_path: Path) -> Path:
    from buckets.lifecycle import create_bucket

    return create_bucket(tmp_path, "demo").root


@pytest.fixture
def rules_dir(demo_bucket: Path) -> Path:
    return demo_bucket / ".b"


@pytest.fixture
def write_record():
    def _write(directory: Path, filename: str, text: str) -> Path:
        path = directory / filename
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
