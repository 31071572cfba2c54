"""Interactive Textual-based picker for a rule's resource kind."""

from __future__ import annotations

from typing import Optional, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, OptionList, Static
from textual.widgets.option_list import Option

from buckets.constants import RESOURCE_KINDS


class KindSelectorApp(App[Optional[str]]):
    """Pick one resource kind; returns None when cancelled."""

    TITLE = "Select resource type"
    CSS = """
    Screen {
        layout: vertical;
    }
    #info {
        height: 3;
        content-align: center middle;
        background: $primary-darken-2;
        color: $text;
        padding: 0 1;
    }
    OptionList {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("enter", "confirm", "Confirm"),
        Binding("q", "quit_app", "Quit"),
    ]

    def __init__(self, target: str, kinds: Sequence[str] = RESOURCE_KINDS) -> None:
        super().__init__()
        self._target = target
        self._kinds = list(kinds)

    @property
    def kinds(self) -> list[str]:
        return list(self._kinds)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(
            f"Target: {self._target} | enter: confirm, q: quit",
            id="info",
        )
        yield OptionList(*[Option(kind.capitalize(), id=kind) for kind in self._kinds])
        yield Footer()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.exit(self._kinds[event.option_index])

    def action_confirm(self) -> None:
        options = self.query_one(OptionList)
        if options.highlighted is None:
            self.exit(None)
            return
        self.exit(self._kinds[options.highlighted])

    def action_quit_app(self) -> None:
        self.exit(None)


def select_kind(target: str) -> Optional[str]:
    return KindSelectorApp(target).run()
