"""
Console logging for the Crypto Currency App

Coloured emoji output with a verbosity filter:
    MINIMAL: warnings, errors and fetch results only
    NORMAL: everything except verbose debug chatter
    DETAILED: everything
"""

import logging
import sys

from termcolor import colored


class CleanFormatter(logging.Formatter):
    """Formatter with a coloured emoji per level"""
    LEVEL_EMOJI = {
        "DEBUG": "🐛",
        "INFO": "ℹ️",
        "WARNING": "⚠️",
        "ERROR": "❌",
        "CRITICAL": "🚨"
    }
    LEVEL_COLOR = {
        "DEBUG": "blue",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "magenta"
    }

    def format(self, record):
        emoji = self.LEVEL_EMOJI.get(record.levelname, "")
        color = self.LEVEL_COLOR.get(record.levelname, "white")
        record.msg = f"{colored(emoji, color)} {record.getMessage()}"
        record.args = ()
        return super().format(record)


class VerbosityFilter(logging.Filter):
    """
    Keyword filter driven by LOG_VERBOSITY

    MINIMAL: only fetch outcomes, warnings and errors
    NORMAL: drop verbose debug chatter
    DETAILED: everything
    """

    CRITICAL_EVENTS = [
        "Fetched",
        "Lifecycle",
        "❌",
        "🚨",
    ]

    VERBOSE_DEBUG = [
        "Theme",
        "Search query",
        "Snapshot",
    ]

    def __init__(self, verbosity_level="NORMAL"):
        super().__init__()
        self.verbosity = verbosity_level.upper()

    def filter(self, record):
        msg = record.getMessage()

        if self.verbosity == "MINIMAL":
            if record.levelno >= logging.WARNING:
                return True
            for keyword in self.CRITICAL_EVENTS:
                if keyword in msg:
                    return True
            return False

        elif self.verbosity == "NORMAL":
            for keyword in self.VERBOSE_DEBUG:
                if keyword in msg:
                    return False
            return True

        else:
            return True


NOISY_MODULES = [
    "urllib3",
    "urllib3.connectionpool",
]

_configured_handler = None


def setup_logging(verbosity="NORMAL"):
    """
    Install the console handler on the root logger.

    Safe to call on every Streamlit rerun: the handler is installed once and
    later calls only update the verbosity.
    """
    global _configured_handler

    verbosity = verbosity.upper()
    root = logging.getLogger()

    if _configured_handler is None:
        handler = logging.StreamHandler(sys.stdout)
        if verbosity == "MINIMAL":
            formatter = CleanFormatter("%(message)s")
        else:
            formatter = CleanFormatter("%(asctime)s %(message)s", datefmt="%H:%M:%S")
        handler.setFormatter(formatter)
        root.addHandler(handler)
        _configured_handler = handler

    for existing in list(_configured_handler.filters):
        if isinstance(existing, VerbosityFilter):
            _configured_handler.removeFilter(existing)
    _configured_handler.addFilter(VerbosityFilter(verbosity))

    root.setLevel(logging.DEBUG if verbosity == "DETAILED" else logging.INFO)

    noisy_level = logging.DEBUG if verbosity == "DETAILED" else logging.WARNING
    for module in NOISY_MODULES:
        logging.getLogger(module).setLevel(noisy_level)

    return _configured_handler
