import logging
import os
import sys

try:
    # Optional: ANSI support on legacy Windows consoles.
    import colorama  # type: ignore

    colorama.just_fix_windows_console()
except Exception:
    pass


# Colors only on a TTY, and only unless LOG_COLOR disables them
USE_COLOR = (
    os.getenv("LOG_COLOR", "1").lower() not in {"0", "false", "no"}
    and hasattr(sys.stdout, "isatty")
    and sys.stdout.isatty()
)


def code(s: str) -> str:
    return s if USE_COLOR else ""


RESET = code("\x1b[0m")
DIM = code("\x1b[90m")
BLUE = code("\x1b[34m")
CYAN = code("\x1b[36m")
GREEN = code("\x1b[32m")
YELLOW = code("\x1b[33m")
RED = code("\x1b[31m")
MAGENTA = code("\x1b[35m")

_LEVEL_COLORS = (
    (logging.CRITICAL, MAGENTA),
    (logging.ERROR, RED),
    (logging.WARNING, YELLOW),
    (logging.INFO, GREEN),
)

DEFAULT_FMT = (
    f"{DIM}%(asctime)s{RESET} | %(levelname_colored)s {CYAN}%(src_module)s:%(src_lineno)d{RESET} - %(message)s"
)
ACCESS_FMT = (
    f"{DIM}%(asctime)s{RESET} | %(levelname_colored)s {YELLOW}%(client_addr)s{RESET} - \"%(request_line)s\" %(status_code)s"
)
DATE_FMT = "%Y-%m-%d %H:%M:%S"


def color_for_level(levelno: int) -> str:
    if not USE_COLOR:
        return ""
    for threshold, color in _LEVEL_COLORS:
        if levelno >= threshold:
            return color
    return BLUE


def _decorate(record: logging.LogRecord, alias: str) -> None:
    """Fill the extra fields DEFAULT_FMT/ACCESS_FMT expect.

    `alias` is the uvicorn logger name folded into plain "uvicorn".
    """
    record.levelname_colored = f"{color_for_level(record.levelno)}{record.levelname}{RESET}"
    record.logger_name = "uvicorn" if record.name == alias else record.name
    if not hasattr(record, "src_module"):
        record.src_module = record.logger_name.rsplit(".", 1)[-1]
    if not hasattr(record, "src_lineno"):
        record.src_lineno = record.lineno


class ColorFormatter(logging.Formatter):
    """Colored, non-padded level name plus short source module and line."""

    def format(self, record: logging.LogRecord) -> str:
        _decorate(record, "uvicorn.error")
        return super().format(record)


try:
    from uvicorn.logging import AccessFormatter as UvicornAccessFormatter  # type: ignore
except Exception:  # pragma: no cover - for environments without uvicorn
    UvicornAccessFormatter = logging.Formatter  # type: ignore


class ColorAccessFormatter(UvicornAccessFormatter):
    """uvicorn access lines in the same layout as ColorFormatter."""

    def format(self, record: logging.LogRecord) -> str:
        _decorate(record, "uvicorn.access")
        return super().format(record)
