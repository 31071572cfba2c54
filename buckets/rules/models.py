"""Rule data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from buckets.rules.probe import IFilesystemProbe


DiagnosticReporter = Callable[[str], None]


@dataclass
class Rule:
    kind: str
    name: str
    expected_exists: bool = True

    def mark_exists(self) -> None:
        self.expected_exists = True

    def mark_not_exists(self) -> None:
        self.expected_exists = False

    def describe(self) -> str:
        return f"{self.kind} '{self.name}'"

    def evaluate(
        self, probe: IFilesystemProbe, report: Optional[DiagnosticReporter] = None
    ) -> bool:
        """Check the rule against live filesystem state.

        Returns True when the target's presence matches ``expected_exists``.
        A mismatch is described through ``report``, if given.
        """
        target_exists = probe.exists(self.name)
        if target_exists == self.expected_exists:
            return True
        if report is not None:
            if not target_exists:
                report(f"target does not exist: {self.describe()}")
            else:
                report(f"target exists but is expected absent: {self.describe()}")
        return False


def new_rule(kind: str, name: str) -> Rule:
    return Rule(kind=kind, name=name, expected_exists=True)
