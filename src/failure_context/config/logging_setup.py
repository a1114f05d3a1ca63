# src/failure_context/config/logging_setup.py
import logging

logger = logging.getLogger(__name__)
DEFAULT_LIBRARY_LOGGER_NAME = "failure_context"


def configure_logging(
    log_level: str = "INFO",
    library_logger_name: str = DEFAULT_LIBRARY_LOGGER_NAME,
    add_console_handler: bool = True,
) -> logging.Logger:
    """
    Sets the level of the library logger and, if it has no handlers yet,
    attaches a console handler so dispatch diagnostics are visible.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    library_logger = logging.getLogger(library_logger_name)
    if add_console_handler and not library_logger.handlers:
        console_h = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - [%(levelname)s] - %(message)s (%(module)s:%(lineno)d)")
        console_h.setFormatter(formatter)
        library_logger.addHandler(console_h)
        library_logger.propagate = False
        logger.debug(f"Added default console handler to logger '{library_logger_name}'.")
    library_logger.setLevel(level)
    return library_logger
