"""Content-addressed store for rule records inside a bucket."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from buckets.constants import (
    BUCKET_CONFIG_FILENAME,
    RULE_TEMP_PREFIX,
    RULE_TEMP_SUFFIX,
)
from buckets.errors import DirectoryUnavailableError, DuplicateRuleError, InvalidRuleError
from buckets.rules.identity import record_filename
from buckets.rules.models import Rule
from buckets.rules.parser import parse_rule, serialize_rule


logger = logging.getLogger(__name__)


class RuleStore:
    """Stores at most one record per distinct rule in ``rules_dir``.

    Records are never rewritten in place. The directory must already exist;
    locating it is the caller's job.
    """

    def __init__(self, rules_dir: Path) -> None:
        self._rules_dir = rules_dir

    @property
    def rules_dir(self) -> Path:
        return self._rules_dir

    def record_path(self, rule: Rule) -> Path:
        return self._rules_dir / record_filename(rule)

    def save(self, rule: Rule) -> Path:
        self._ensure_dir()
        path = self.record_path(rule)
        if os.path.lexists(path):
            raise DuplicateRuleError(path)
        for value in (rule.kind, rule.name):
            try:
                value.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise InvalidRuleError(path, f"not valid UTF-8: {value!r}") from exc
        text = serialize_rule(rule)

        try:
            fd, temp_name = tempfile.mkstemp(
                dir=self._rules_dir, prefix=RULE_TEMP_PREFIX, suffix=RULE_TEMP_SUFFIX
            )
        except OSError as exc:
            raise DirectoryUnavailableError(self._rules_dir, exc.strerror or str(exc)) from exc
        temp_path = Path(temp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            # link() fails on an existing name; records are never overwritten
            os.link(temp_path, path)
        except FileExistsError as exc:
            raise DuplicateRuleError(path) from exc
        except OSError as exc:
            raise DirectoryUnavailableError(self._rules_dir, exc.strerror or str(exc)) from exc
        finally:
            temp_path.unlink(missing_ok=True)

        logger.debug("saved rule %s as %s", rule.describe(), path.name)
        return path

    def list_record_paths(self) -> list[Path]:
        self._ensure_dir()
        try:
            entries = sorted(self._rules_dir.iterdir())
        except OSError as exc:
            raise DirectoryUnavailableError(self._rules_dir, exc.strerror or str(exc)) from exc
        return [entry for entry in entries if self._is_record_entry(entry)]

    def load_all(self) -> list[Rule]:
        rules: list[Rule] = []
        for path in self.list_record_paths():
            rules.append(parse_rule(path))
            logger.debug("loaded rule record %s", path.name)
        return rules

    def count(self) -> int:
        return len(self.list_record_paths())

    def _ensure_dir(self) -> None:
        if not self._rules_dir.exists():
            raise DirectoryUnavailableError(self._rules_dir, "missing")
        if not self._rules_dir.is_dir():
            raise DirectoryUnavailableError(self._rules_dir, "not a directory")

    @staticmethod
    def _is_record_entry(entry: Path) -> bool:
        if entry.name == BUCKET_CONFIG_FILENAME:
            return False
        if entry.name.startswith(RULE_TEMP_PREFIX):
            return False
        return True
