from pathlib import Path

from rich.console import Console
from rich.markup import escape

from buckets.checker import Verdict
from buckets.rules.models import Rule
from buckets.tui.enums import UIStyle
from buckets.tui.sections import UISection
from buckets.tui.tables import VerdictTable


class BucketConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_check(self, verdict: Verdict, bucket: str, diagnostics: list[str]) -> None:
        self.console.print(
            UISection.wrap(
                "check",
                VerdictTable.summary_block(verdict, bucket=bucket),
                style=UIStyle.BLUE.value,
            )
        )

        if diagnostics:
            self.console.print(
                UISection.bullets("diagnostics", diagnostics, style=UIStyle.RED.value)
            )
        if verdict.violations:
            self.console.print(
                UISection.wrap(
                    "violations",
                    VerdictTable.violations_table(verdict.violations),
                    style=UIStyle.RED.value,
                )
            )

        self.console.print(UISection.verdict(verdict.ok, verdict.message))

    def render_rule_saved(self, rule: Rule, path: Path) -> None:
        expectation = "present" if rule.expected_exists else "absent"
        self.console.print(
            UISection.note(
                "expect",
                f"Expecting {escape(rule.kind)} [bold]{escape(rule.name)}[/bold] {expectation}\n"
                f"{escape(path.name)}",
                style=UIStyle.GREEN.value,
            )
        )

    def render_bucket_saved(self, name: str, path: Path, renamed_from: str | None = None) -> None:
        if renamed_from is None:
            text = f"Bucket created: [bold]{escape(name)}[/bold]"
        else:
            text = f"Bucket renamed: {escape(renamed_from)} -> [bold]{escape(name)}[/bold]"
        self.console.print(
            UISection.note("bucket", f"{text}\n{escape(str(path))}", style=UIStyle.GREEN.value)
        )

    def render_repository_created(self, name: str, path: Path) -> None:
        self.console.print(
            UISection.note(
                "repository",
                f"Initialised bucket repository: [bold]{escape(name)}[/bold]\n{escape(str(path))}",
                style=UIStyle.GREEN.value,
            )
        )

    def render_info(self, root: Path, content: str) -> None:
        self.console.print("Found repository")
        self.console.print(
            UISection.wrap(
                "repository",
                escape(content),
                style=UIStyle.BLUE.value,
                subtitle=escape(str(root)),
            )
        )

    def render_cancelled(self, what: str) -> None:
        self.console.print(UISection.note(what, "Cancelled.", style=UIStyle.YELLOW.value))
