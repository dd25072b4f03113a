from loguru import logger

from shared.utils.logging import setup_logging


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "client.log"

    setup_logging(level="debug", log_file=str(log_file))
    logger.debug("registering upload")
    logger.remove()

    assert "registering upload" in log_file.read_text(encoding="utf-8")
