"""
Logging setup shared by the web app, ``run.py`` and ``build_site.py``.

All three entry points read ``LOG_LEVEL`` and ``LOG_FILE`` from
``Settings`` and pass them here.  ``resolve_log_level`` is the single
place that turns the free-form ``LOG_LEVEL`` value into a level name,
so the site's own handlers and uvicorn's loggers always agree: an
unknown name such as ``verbose`` falls back to ``INFO`` for both.
"""

import logging
from pathlib import Path
from typing import Optional

DEFAULT_LEVEL = "INFO"

# Level names understood by both the ``logging`` module and uvicorn.
KNOWN_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(level: Optional[str]) -> str:
    """Return the upper-case level name for ``level``, or ``INFO`` if unknown."""
    name = (level or "").strip().upper()
    return name if name in KNOWN_LEVELS else DEFAULT_LEVEL


def setup_logging(level: str = DEFAULT_LEVEL, logfile: Optional[str] = None) -> None:
    """Attach the site's console (and optional file) handler to the root logger.

    Does nothing when the root logger already has handlers, which is
    the case under uvicorn's own logging config and under pytest.

    Parameters
    ----------
    level : str
        ``LOG_LEVEL`` as configured; normalised with ``resolve_log_level``.
    logfile : Optional[str]
        ``LOG_FILE`` as configured.  Missing parent directories are
        created so a fresh deployment can point it at ``logs/site.log``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(resolve_log_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
