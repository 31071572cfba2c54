from rich.markup import escape
from rich.table import Column, Table

from buckets.checker import Verdict
from buckets.rules.models import Rule
from buckets.tui.enums import verdict_style


def _expectation_label(rule: Rule) -> str:
    return "present" if rule.expected_exists else "absent"


class VerdictTable:
    @staticmethod
    def summary_block(verdict: Verdict, bucket: str) -> Table:
        style = verdict_style(verdict.ok)
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Bucket", escape(bucket))
        table.add_row("Rules", str(verdict.evaluated))
        table.add_row("Violations", f"[{style}]{len(verdict.violations)}[/{style}]")
        return table

    @staticmethod
    def violations_table(rules: list[Rule]) -> Table:
        table = Table(
            Column(header="Type", width=10),
            Column(header="Target", overflow="fold"),
            Column(header="Expected", width=10),
            expand=True,
            header_style="bold",
        )
        for rule in rules:
            table.add_row(escape(rule.kind), escape(rule.name), _expectation_label(rule))
        return table
