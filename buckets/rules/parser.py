"""Parse and serialize rule records (YAML documents)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from buckets.errors import MalformedRecordError
from buckets.rules.models import Rule


RULE_RECORD_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "type": {"type": "string"},
        "exist": {"type": "boolean"},
    },
    "required": ["name", "type", "exist"],
    "additionalProperties": False,
}

_VALIDATOR = Draft202012Validator(RULE_RECORD_SCHEMA)


def rule_to_document(rule: Rule) -> dict[str, Any]:
    return {"name": rule.name, "type": rule.kind, "exist": rule.expected_exists}


def rule_from_document(document: Any, path: Path) -> Rule:
    error = best_match(_VALIDATOR.iter_errors(document))
    if error is not None:
        location = ".".join(str(part) for part in error.path) or "<root>"
        raise MalformedRecordError(path, f"{location}: {error.message}")
    return Rule(
        kind=document["type"],
        name=document["name"],
        expected_exists=document["exist"],
    )


def serialize_rule(rule: Rule) -> str:
    return yaml.safe_dump(
        rule_to_document(rule), default_flow_style=False, sort_keys=False
    )


def parse_rule(path: Path) -> Rule:
    if not path.is_file():
        raise MalformedRecordError(path, "not a regular file")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedRecordError(path, str(exc)) from exc
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MalformedRecordError(path, f"invalid YAML: {exc}") from exc
    return rule_from_document(document, path)
