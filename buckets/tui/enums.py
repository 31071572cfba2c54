from enum import Enum


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


def verdict_style(ok: bool) -> str:
    return UIStyle.GREEN.value if ok else UIStyle.RED.value
