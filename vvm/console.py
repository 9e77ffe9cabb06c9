# -*- coding: utf-8 -*-
from typing import Optional

from rich.console import Console
from rich.text import Text

from .exceptions import VvmException


class StatusReporter:
    """
    Wrapper around Rich consoles for vvm status lines.

    Progress text is gray, confirmations are green and errors are written to
    stderr as an underlined red ``ERROR`` tag, a red message and an optional
    magenta detail value.
    """

    def __init__(self, console: Optional[Console] = None, error_console: Optional[Console] = None):
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)

    def info(self, msg: str) -> None:
        self.console.print(msg, style="bright_black", markup=False, highlight=False)

    def success(self, msg: str) -> None:
        self.console.print(msg, style="green", markup=False, highlight=False)

    def output(self, text: Optional[str], style: str = "bright_black") -> None:
        """
        Echo captured process output as is.

        :param text: Captured stdout or stderr, skipped when empty
        :param style: Rich style for the whole block
        """
        if text and text.strip():
            self.console.print(text.rstrip("\n"), style=style, markup=False, highlight=False)

    def mounted(self, mount_point: str) -> None:
        line = Text()
        line.append("VM mounted at ", style="bright_black")
        line.append(mount_point, style="bold")
        self.console.print(line)

    def error(self, msg: str, detail: Optional[str] = None) -> None:
        self.error_console.print(self.error_message(msg, detail))

    def exception(self, error: VvmException) -> None:
        self.error(error.message, error.detail)

    @staticmethod
    def error_message(msg: str, detail: Optional[str] = None) -> Text:
        text = Text()
        text.append("ERROR", style="underline red")
        text.append(f": {msg}", style="red")
        if detail:
            text.append(f" {detail}", style="magenta")
        return text
