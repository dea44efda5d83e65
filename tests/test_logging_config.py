import logging

import pytest

from crypto_tracker import logging_config
from crypto_tracker.logging_config import CleanFormatter, VerbosityFilter, setup_logging


def _record(msg, level=logging.INFO):
    return logging.LogRecord("crypto_tracker.test", level, __file__, 1, msg, (), None)


def test_minimal_keeps_fetch_results_and_warnings_only():
    f = VerbosityFilter("minimal")

    assert f.filter(_record("📊 Fetched 100 coins"))
    assert f.filter(_record("✅ Lifecycle: READY with 100 coins"))
    assert f.filter(_record("rate limited", logging.WARNING))
    assert not f.filter(_record("🚀 Dashboard session created"))


def test_normal_drops_verbose_chatter():
    f = VerbosityFilter("NORMAL")

    assert not f.filter(_record("🎨 Theme switched to dark", logging.DEBUG))
    assert not f.filter(_record("🔍 Search query changed (3 chars)", logging.DEBUG))
    assert f.filter(_record("🚀 Dashboard session created"))


def test_detailed_keeps_everything():
    f = VerbosityFilter("DETAILED")
    assert f.filter(_record("🎨 Theme switched to dark", logging.DEBUG))


def test_clean_formatter_prefixes_level_emoji():
    formatter = CleanFormatter("%(message)s")

    output = formatter.format(_record("Fetched 3 coins", logging.ERROR))

    assert "❌" in output
    assert output.endswith("Fetched 3 coins")


def test_clean_formatter_applies_args():
    formatter = CleanFormatter("%(message)s")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "Fetched %d coins", (7,), None)

    assert formatter.format(record).endswith("Fetched 7 coins")


@pytest.fixture
def clean_root_logger(monkeypatch):
    root = logging.getLogger()
    level = root.level
    noisy_levels = {name: logging.getLogger(name).level for name in logging_config.NOISY_MODULES}
    monkeypatch.setattr(logging_config, "_configured_handler", None)
    yield root
    for name, noisy_level in noisy_levels.items():
        logging.getLogger(name).setLevel(noisy_level)
    if logging_config._configured_handler is not None:
        root.removeHandler(logging_config._configured_handler)
    root.setLevel(level)


def test_setup_logging_installs_one_handler(clean_root_logger):
    before = len(clean_root_logger.handlers)

    handler = setup_logging("NORMAL")
    again = setup_logging("MINIMAL")

    assert handler is again
    assert len(clean_root_logger.handlers) == before + 1
    verbosity_filters = [f for f in handler.filters if isinstance(f, VerbosityFilter)]
    assert [f.verbosity for f in verbosity_filters] == ["MINIMAL"]


def test_setup_logging_quiets_urllib3_unless_detailed(clean_root_logger):
    setup_logging("NORMAL")
    assert logging.getLogger("urllib3").level == logging.WARNING

    setup_logging("DETAILED")
    assert logging.getLogger("urllib3").level == logging.DEBUG
    assert clean_root_logger.level == logging.DEBUG
