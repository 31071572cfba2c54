"""Content addressing for rules.

A rule's identity is the sha256 of a canonical JSON encoding of its fields,
in a fixed order and tagged with their types, so ``"true"`` as a name never
collides with ``True`` as a flag and the digest is stable across processes.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

from buckets.constants import RULE_RECORD_SUFFIX
from buckets.rules.models import Rule


def _tagged_fields(rule: Rule) -> list[list[Any]]:
    return [
        ["kind", "str", rule.kind],
        ["name", "str", rule.name],
        ["exist", "bool", rule.expected_exists],
    ]


def address_of(rule: Rule) -> str:
    payload = json.dumps(
        _tagged_fields(rule), ensure_ascii=False, separators=(",", ":")
    )
    # surrogateescape keeps undecodable path bytes hashable
    return hashlib.sha256(payload.encode("utf-8", "surrogateescape")).hexdigest()


def record_filename(rule: Rule) -> str:
    return f"{address_of(rule)}{RULE_RECORD_SUFFIX}"
