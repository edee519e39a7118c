import logging
from logging.handlers import RotatingFileHandler

from rich.logging import RichHandler

from data.exceptions import StorageWriteError
from data.store import DATA_FILE, ensure_exists
from presentation import cli

# --- Configuration Constants ---
LOG_FILE = "bakery.log"
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3
FILE_LOG_LEVEL = logging.INFO
CONSOLE_LOG_LEVEL = logging.ERROR

logger = logging.getLogger("bakery")


def setup_logging(log_file: str = LOG_FILE) -> None:
    """Send INFO and up to a rotating log file, ERROR and up to the console."""
    file_handler = RotatingFileHandler(
        log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.setLevel(FILE_LOG_LEVEL)
    file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    console_handler = RichHandler(console=cli.console, show_path=False)
    console_handler.setLevel(CONSOLE_LOG_LEVEL)

    logging.basicConfig(level=FILE_LOG_LEVEL, handlers=[file_handler, console_handler], force=True)


def main(data_file: str = DATA_FILE) -> None:
    setup_logging()
    try:
        ensure_exists(data_file)
    except StorageWriteError as e:
        # Every save will report the same problem; the menu still runs.
        logger.error("Could not create %s: %s", data_file, e.reason)
    cli.main(data_file)


if __name__ == "__main__":
    main()
