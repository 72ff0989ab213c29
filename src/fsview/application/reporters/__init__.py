"""Reporters: textual output of views."""

from fsview.application.reporters.console import ConsoleConfig, ConsoleReporter
from fsview.application.reporters.plain_text import PlainTextConfig, PlainTextReporter
from fsview.application.reporters.protocol import ViewReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextConfig",
    "PlainTextReporter",
    "ViewReporter",
]
