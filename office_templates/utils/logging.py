import inspect
import logging
from typing import Optional, Tuple

from .logging_formatters import ColorFormatter, DEFAULT_FMT, DATE_FMT

_THIS_MODULE = __name__


def setup_logging(level: int | str = logging.INFO) -> None:
    """Configure the root logger with the colored format used by uvicorn.

    Does nothing when the root logger already has handlers.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(ColorFormatter(fmt=DEFAULT_FMT, datefmt=DATE_FMT))
    root.setLevel(level)
    root.addHandler(handler)


def _caller_info() -> Tuple[str, int, int]:
    """Find the first frame outside this module.

    Returns (short_module_name, lineno, wrappers) where `wrappers` is how many
    frames of this module sit above the caller; stacklevel is wrappers + 1.
    """
    f = inspect.currentframe()
    if f is not None:
        f = f.f_back
    wrappers = 0
    while f is not None:
        modname = f.f_globals.get("__name__", "")
        if modname == _THIS_MODULE:
            wrappers += 1
            f = f.f_back
            continue
        short = modname.rsplit(".", 1)[-1] if modname else "office_templates"
        return short, f.f_lineno, wrappers
    return "office_templates", 0, wrappers


def log(
    msg: str,
    *args,
    level: int = logging.INFO,
    category: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
    **kwargs,
) -> None:
    """Log with the caller's module and line as the source.

    - Logger defaults to the caller's short module name (e.g. "resolver").
    - `category` is prefixed to the message as "[category] ".
    """
    name, src_lineno, wrappers = _caller_info()
    if logger is None:
        logger = logging.getLogger(name)

    if category:
        msg = f"[{category}] {msg}"

    extra = {"src_module": logger.name, "src_lineno": src_lineno}
    logger.log(level, msg, *args, stacklevel=wrappers + 1, extra=extra, **kwargs)


def debug(msg: str, *args, **kwargs) -> None:
    log(msg, *args, level=logging.DEBUG, **kwargs)


def info(msg: str, *args, **kwargs) -> None:
    log(msg, *args, level=logging.INFO, **kwargs)


def warning(msg: str, *args, **kwargs) -> None:
    log(msg, *args, level=logging.WARNING, **kwargs)


def error(msg: str, *args, **kwargs) -> None:
    log(msg, *args, level=logging.ERROR, **kwargs)


def exception(msg: str, *args, **kwargs) -> None:
    kwargs.setdefault("exc_info", True)
    log(msg, *args, level=logging.ERROR, **kwargs)


__all__ = [
    "setup_logging",
    "log",
    "debug",
    "info",
    "warning",
    "error",
    "exception",
]
