from typing import Optional

from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from buckets.tui.enums import UIStyle, verdict_style


class UISection:
    @staticmethod
    def wrap(title: str, body, style: str = UIStyle.BLUE.value, subtitle: Optional[str] = None) -> Panel:
        return Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))

    @staticmethod
    def note(title: str, body: str, style: str) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def bullets(title: str, items: list[str], style: str) -> Panel:
        return UISection.note(title, "\n".join(f"- {escape(item)}" for item in items), style=style)

    @staticmethod
    def verdict(ok: bool, message: str) -> Text:
        return Text(message, style=f"bold {verdict_style(ok)}")
