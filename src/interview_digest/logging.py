import logging
import os
import sys

from pythonjsonlogger import jsonlogger


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configures structured JSON logging for the application.

    Installs a single JSON stream handler on the root logger. Logs go to
    stderr because stdout may carry the generated transcripts.

    Args:
        level: Log level name. Defaults to the LOG_LEVEL environment variable, then INFO.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    # Unknown names are rejected by load_config; log at INFO until then.
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"
    root_logger.setLevel(level_name)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    # The SDK's HTTP stack is chatty at INFO.
    for logger_name in ["httpx", "google_genai", "urllib3"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return root_logger
