"""
Logging setup tests
"""

from loguru import logger

from pricing_admin.monitoring import get_logger, setup_logging


def test_file_sinks(tmp_path):
    log_file = tmp_path / "logs" / "admin.log"

    setup_logging(log_level="info", log_file=log_file, console_output=False)
    get_logger("tests").info("category list loaded")
    get_logger("tests").error("backend unavailable")
    logger.remove()

    assert "category list loaded" in log_file.read_text()
    error_log = (tmp_path / "logs" / "admin_error.log").read_text()
    assert "backend unavailable" in error_log
    assert "category list loaded" not in error_log


def test_bound_context_is_kept():
    adapter = get_logger("tests", request_id="abc").bind(marketplace_id=3)

    assert adapter.context == {"request_id": "abc", "marketplace_id": 3}
