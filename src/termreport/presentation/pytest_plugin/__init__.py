"""pytest plugin for termreport.

Renders failures, incomplete tests and uncaught exceptions of a pytest
run with TerminalReporter, followed by the one-line run summary.

Usage:
    pytest -p termreport.presentation.pytest_plugin --termreport

Configuration (pytest.ini or pyproject.toml):
    termreport_banner: First line printed before the results
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from termreport.application.reporters.terminal import DEFAULT_BANNER, TerminalConfig
from termreport.infrastructure.logging import setup_logging
from termreport.presentation.pytest_plugin.collector import TermReportPlugin

if TYPE_CHECKING:
    import pytest

PLUGIN_NAME = "termreport-collector"

__all__ = ["PLUGIN_NAME", "TermReportPlugin"]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command line and ini options."""
    group = parser.getgroup("termreport", "colorized terminal report")
    group.addoption(
        "--termreport",
        action="store_true",
        default=False,
        help="render results with the termreport terminal reporter",
    )
    group.addoption(
        "--termreport-log-level",
        default=None,
        help="log level for termreport diagnostics on stderr (e.g. DEBUG)",
    )
    parser.addini("termreport_banner", "first line printed before the results")


def _banner(config: pytest.Config) -> str:
    """Banner from ini option, default banner when unset."""
    value = config.getini("termreport_banner")
    if value:
        return f"{value}\n\n"
    return DEFAULT_BANNER


def pytest_configure(config: pytest.Config) -> None:
    """Register the collector when --termreport is given."""
    level = config.getoption("termreport_log_level")
    if level:
        setup_logging(level.upper())

    if config.getoption("termreport"):
        # Incomplete traces end at the test module frame that used the missing name.
        terminal_config = TerminalConfig(banner=_banner(config), incomplete_trace_start=0)
        plugin = TermReportPlugin(terminal_config)
        config.pluginmanager.register(plugin, PLUGIN_NAME)


def pytest_unconfigure(config: pytest.Config) -> None:
    """Unregister the collector."""
    plugin = config.pluginmanager.get_plugin(PLUGIN_NAME)
    if plugin is not None:
        config.pluginmanager.unregister(plugin)
