import logging
from hexagon_sim.logging_config import setup_logging

def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "sim.log"
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))
    try:
        assert logger.name == "hexagon_sim"
        assert len(logger.handlers) == 2
        first_file_handler = next(h for h in logger.handlers if isinstance(h, logging.FileHandler))

        # Calling again does not stack handlers and closes the old file
        logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))
        assert len(logger.handlers) == 2

        logging.getLogger("hexagon_sim.simulation").debug("hello from a tick")
        for h in logger.handlers:
            h.flush()
        assert first_file_handler.stream is None
        assert "hello from a tick" in log_file.read_text(encoding="utf-8")
    finally:
        for h in list(logger.handlers):
            h.close()
            logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)
