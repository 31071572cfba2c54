from pathlib import Path

import pytest
import yaml

from buckets.errors import (
    BucketExistsError,
    BucketNotFoundError,
    InvalidBucketConfigError,
    NotABucketError,
)
from buckets.lifecycle import create_bucket, load_bucket_config, rename_bucket
from buckets.rules.models import new_rule
from buckets.rules.repository import RuleStore


def test_create_bucket_layout(tmp_path: Path) -> None:
    config = create_bucket(tmp_path, "demo")

    assert config.root == tmp_path / "demo"
    assert config.rules_dir.is_dir()
    assert yaml.safe_load(config.config_path.read_text(encoding="utf-8")) == {"name": "demo"}


def test_create_bucket_rejects_existing_directory(tmp_path: Path) -> None:
    (tmp_path / "demo").mkdir()
    with pytest.raises(BucketExistsError):
        create_bucket(tmp_path, "demo")


def test_load_bucket_config(demo_bucket: Path) -> None:
    config = load_bucket_config(demo_bucket)
    assert config.name == "demo"
    assert config.root == demo_bucket


def test_load_bucket_config_not_a_bucket(tmp_path: Path) -> None:
    with pytest.raises(NotABucketError):
        load_bucket_config(tmp_path)


def test_load_bucket_config_invalid(demo_bucket: Path) -> None:
    (demo_bucket / ".b" / "config.yaml").write_text("name: ''\n", encoding="utf-8")
    with pytest.raises(InvalidBucketConfigError):
        load_bucket_config(demo_bucket)


def test_load_bucket_config_missing_file(demo_bucket: Path) -> None:
    (demo_bucket / ".b" / "config.yaml").unlink()
    with pytest.raises(InvalidBucketConfigError):
        load_bucket_config(demo_bucket)


def test_rename_bucket_keeps_rules(tmp_path: Path, demo_bucket: Path) -> None:
    RuleStore(demo_bucket / ".b").save(new_rule("bucket", "Flower"))

    config = rename_bucket(tmp_path, "demo", "garden")

    assert not demo_bucket.exists()
    assert config.name == "garden"
    assert load_bucket_config(tmp_path / "garden").name == "garden"
    assert [rule.name for rule in RuleStore(config.rules_dir).load_all()] == ["Flower"]


def test_rename_missing_bucket(tmp_path: Path) -> None:
    with pytest.raises(BucketNotFoundError):
        rename_bucket(tmp_path, "ghost", "other")


def test_rename_plain_directory(tmp_path: Path) -> None:
    (tmp_path / "plain").mkdir()
    with pytest.raises(NotABucketError):
        rename_bucket(tmp_path, "plain", "other")


def test_rename_onto_existing(tmp_path: Path, demo_bucket: Path) -> None:
    (tmp_path / "taken").mkdir()
    with pytest.raises(BucketExistsError):
        rename_bucket(tmp_path, "demo", "taken")
    assert demo_bucket.exists()


def test_rename_bucket_keeps_other_config_keys(tmp_path: Path, demo_bucket: Path) -> None:
    (demo_bucket / ".b" / "config.yaml").write_text(
        "name: demo\nowner: ops\n", encoding="utf-8"
    )

    config = rename_bucket(tmp_path, "demo", "garden")

    assert yaml.safe_load(config.config_path.read_text(encoding="utf-8")) == {
        "name": "garden",
        "owner": "ops",
    }
    assert load_bucket_config(tmp_path / "garden").extra == {"owner": "ops"}
