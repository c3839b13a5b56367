from __future__ import annotations

import logging

import numpy as np

from manyvecs import config_logging, create_vec2, set_up_simple_logging
from manyvecs.logging import LOG_FORMAT, mv_logger


def test_type_creation_is_logged(caplog, scratch_registry):
    caplog.set_level(logging.DEBUG, logger="manyvecs.typed")
    create_vec2("Vec2LoggedF16", np.float16, "floating")
    assert any("Vec2LoggedF16" in r.getMessage() for r in caplog.records)


def test_config_logging(clean_logging):
    handler = logging.NullHandler()
    config_logging([handler], level=logging.WARNING, redirect_warnings=False)
    assert handler in logging.getLogger().handlers
    assert mv_logger.level == logging.WARNING

    other = logging.NullHandler()
    config_logging([other], replace=True, redirect_warnings=False)
    assert handler not in logging.getLogger().handlers
    assert other in logging.getLogger().handlers


def test_set_up_simple_logging(tmp_path, clean_logging):
    log_file = tmp_path / "manyvecs.log"
    log_file.write_text("old run\n")

    set_up_simple_logging(log_file=str(log_file), redirect_warnings=False)
    logging.getLogger("manyvecs.test").info("hello from the tests")
    for h in logging.getLogger().handlers:
        h.flush()

    assert (tmp_path / "manyvecs.log.1").read_text() == "old run\n"
    content = log_file.read_text(encoding="utf-8")
    assert "Started manyvecs logging." in content
    assert "hello from the tests" in content
    assert "Moved old log file" in content
    assert "|INFO     |" in content
    assert LOG_FORMAT.startswith("%(asctime)")
