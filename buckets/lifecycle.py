"""Create, rename and inspect buckets."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from buckets.constants import BUCKET_CONFIG_FILENAME, BUCKET_DIRNAME
from buckets.errors import (
    BucketExistsError,
    BucketNotFoundError,
    InvalidBucketConfigError,
    NotABucketError,
)


logger = logging.getLogger(__name__)

BUCKET_CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {"name": {"type": "string", "minLength": 1}},
    "required": ["name"],
}


@dataclass(frozen=True)
class BucketConfig:
    name: str
    root: Path
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def rules_dir(self) -> Path:
        return self.root / BUCKET_DIRNAME

    @property
    def config_path(self) -> Path:
        return self.rules_dir / BUCKET_CONFIG_FILENAME

    def as_dict(self) -> dict[str, Any]:
        return {"name": self.name, **self.extra}


def _write_config(config: BucketConfig, exclusive: bool) -> None:
    mode = "x" if exclusive else "w"
    with config.config_path.open(mode, encoding="utf-8") as handle:
        yaml.safe_dump(config.as_dict(), handle, default_flow_style=False, sort_keys=False)


def load_bucket_config(bucket_root: Path) -> BucketConfig:
    config_path = bucket_root / BUCKET_DIRNAME / BUCKET_CONFIG_FILENAME
    if not (bucket_root / BUCKET_DIRNAME).is_dir():
        raise NotABucketError(bucket_root)
    try:
        payload = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise InvalidBucketConfigError(config_path, exc.strerror or str(exc)) from exc
    except yaml.YAMLError as exc:
        raise InvalidBucketConfigError(config_path, f"invalid YAML: {exc}") from exc

    errors = list(Draft202012Validator(BUCKET_CONFIG_SCHEMA).iter_errors(payload))
    if errors:
        raise InvalidBucketConfigError(config_path, errors[0].message)
    extra = {key: value for key, value in payload.items() if key != "name"}
    return BucketConfig(name=payload["name"], root=bucket_root, extra=extra)


def create_bucket(parent: Path, name: str) -> BucketConfig:
    bucket_root = parent / name
    if bucket_root.exists():
        raise BucketExistsError(bucket_root)
    bucket_root.mkdir(mode=0o755)
    (bucket_root / BUCKET_DIRNAME).mkdir(mode=0o755)

    config = BucketConfig(name=name, root=bucket_root)
    _write_config(config, exclusive=True)
    logger.debug("created bucket %s at %s", name, bucket_root)
    return config


def rename_bucket(parent: Path, old_name: str, new_name: str) -> BucketConfig:
    old_root = parent / old_name
    new_root = parent / new_name
    if not old_root.exists():
        raise BucketNotFoundError(old_root)
    if not (old_root / BUCKET_DIRNAME).is_dir():
        raise NotABucketError(old_root)
    if new_root.exists():
        raise BucketExistsError(new_root)

    current = load_bucket_config(old_root)
    old_root.rename(new_root)
    config = replace(current, name=new_name, root=new_root)
    _write_config(config, exclusive=False)
    logger.debug("renamed bucket %s to %s", old_name, new_name)
    return config
