"""Evaluate every stored rule of a bucket and aggregate a verdict."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from buckets.constants import BUCKET_DIRNAME
from buckets.rules.models import DiagnosticReporter, Rule
from buckets.rules.probe import IFilesystemProbe, LocalFilesystemProbe
from buckets.rules.repository import RuleStore


logger = logging.getLogger(__name__)

MET_MESSAGE = "Bucket meets expectations"
NOT_MET_MESSAGE = "Bucket doesn't meet expectations"


@dataclass
class Verdict:
    ok: bool = True
    evaluated: int = 0
    violations: list[Rule] = field(default_factory=list)

    @property
    def message(self) -> str:
        return MET_MESSAGE if self.ok else NOT_MET_MESSAGE


class Checker:
    def __init__(self, store: RuleStore, probe: IFilesystemProbe) -> None:
        self.store = store
        self.probe = probe

    def check(self, report: Optional[DiagnosticReporter] = None) -> Verdict:
        """Evaluate all rules in record order.

        Every rule is evaluated, even after the verdict is already violated,
        so that each failing rule reports its own diagnostic.
        """
        rules = self.store.load_all()
        verdict = Verdict()
        for rule in rules:
            passed = rule.evaluate(self.probe, report)
            verdict.evaluated += 1
            logger.debug("rule %s %s", rule.describe(), "passed" if passed else "failed")
            if not passed:
                verdict.violations.append(rule)
                verdict.ok = False
        return verdict


def check_bucket(
    bucket_root: Path, report: Optional[DiagnosticReporter] = None
) -> Verdict:
    store = RuleStore(bucket_root / BUCKET_DIRNAME)
    return Checker(store=store, probe=LocalFilesystemProbe(bucket_root)).check(report)
