"""Reporters for test run results.

TerminalReporter is the built-in ANSI reporter.
Users can implement custom reporters on top of BaseReporter.
"""

from termreport.application.reporters._base import BaseReporter
from termreport.application.reporters.protocol import ReporterProtocol
from termreport.application.reporters.terminal import TerminalConfig, TerminalReporter

__all__ = [
    "BaseReporter",
    "ReporterProtocol",
    "TerminalConfig",
    "TerminalReporter",
]
