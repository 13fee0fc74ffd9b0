"""
Console (and optional rotating file) log setup.
"""
import logging
import logging.handlers
import sys

from utils.config import LOG_FILE, LOG_LEVEL

_CONSOLE_HANDLER = "scoutpredict.console"
_FILE_HANDLER = "scoutpredict.file"


def setup_logging() -> logging.Logger:
    root = logging.getLogger()
    root.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))

    # Streamlit re-executes the script on every interaction.
    installed = {h.get_name() for h in root.handlers}
    if _CONSOLE_HANDLER in installed:
        return root

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)-7s | %(name)-22s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stdout)
    ch.set_name(_CONSOLE_HANDLER)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if LOG_FILE is not None:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        # 5 MB x 3 backups
        fh = logging.handlers.RotatingFileHandler(
            LOG_FILE,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        fh.set_name(_FILE_HANDLER)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Silence noisy libs
    logging.getLogger("watchdog").setLevel(logging.WARNING)

    return root
