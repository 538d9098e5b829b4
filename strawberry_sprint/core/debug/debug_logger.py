"""
debug_logger.py
---------------
Console logger for the scene, filtered by category and verbosity.

Responsibilities:
- Coloured, tagged log lines with the calling class/module as source
- Per-category on/off switches and a global verbosity level
- Rate-limited traces for per-tick chatter
- Boot report helpers (section headers, dotted init entries)
"""

import sys
import time
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Which categories log, and how much."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Host & services
        "loading": False,
        "system": True,
        "display": True,
        "input": False,
        "event_manager": False,

        # Scene
        "scene": True,
        "steering": False,
        "entity_spawn": True,
        "entity_cleanup": False,
        "collision": True,
        "animation": False,

        # Presentation
        "render": True,
        "ui": True,
    }

    @classmethod
    def configure(cls, level: str = None, enable: bool = None, categories=None):
        """
        Adjust logging at startup (used by the command line).

        Args:
            level: New LOG_LEVEL name.
            enable: Master switch.
            categories: Iterable of category names to switch on.
        """
        if level is not None:
            level = level.upper()
            if level not in DebugLogger.LEVEL_VALUES:
                raise ValueError(f"Unknown log level: {level}")
            cls.LOG_LEVEL = level
        if enable is not None:
            cls.ENABLE_LOGGING = enable
        for name in categories or ():
            cls.CATEGORIES[name] = True


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger; every public method takes a category keyword."""

    LINE_LENGTH = 59

    LEVEL_VALUES = {
        "NONE": 0,
        "ERROR": 1,
        "WARN": 2,
        "INFO": 3,
        "VERBOSE": 4,
    }

    # kind -> (tag, colour, level)
    KINDS = {
        "init": ("INIT", Colors.WHITE, "INFO"),
        "system": ("SYSTEM", Colors.MAGENTA, "INFO"),
        "state": ("STATE", Colors.CYAN, "INFO"),
        "action": ("ACTION", Colors.GREEN, "INFO"),
        "trace": ("TRACE", Colors.BLUE, "VERBOSE"),
        "warn": ("WARN", Colors.YELLOW, "WARN"),
        "fail": ("FAIL", Colors.RED, "ERROR"),
    }

    _last_emit = {}

    # ===========================================================
    # Filtering
    # ===========================================================

    @staticmethod
    def enabled(category: str, level: str = "INFO") -> bool:
        """Would a message of this category and level be printed?"""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        wanted = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return DebugLogger.LEVEL_VALUES[level] <= wanted

    # ===========================================================
    # Source Detection
    # ===========================================================

    @staticmethod
    def _source() -> str:
        """Name of the first caller outside this module (class name if it has one)."""
        frame = sys._getframe(1)
        while frame is not None and frame.f_code.co_filename == __file__:
            frame = frame.f_back
        if frame is None:
            return "Unknown"

        local_self = frame.f_locals.get("self")
        if local_self is not None:
            return type(local_self).__name__
        local_cls = frame.f_locals.get("cls")
        if isinstance(local_cls, type):
            return local_cls.__name__

        module = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1][:-3]
        return "".join(part.capitalize() for part in module.split("_"))

    # ===========================================================
    # Emit
    # ===========================================================

    @staticmethod
    def _emit(kind: str, msg: str, category: str, meta_mode: str = "full"):
        tag, color, level = DebugLogger.KINDS[kind]
        if not DebugLogger.enabled(category, level):
            return

        stamp = f"[{datetime.now():%H:%M:%S}]"
        source = f"[{DebugLogger._source()}]"
        prefix = {
            "full": f"{stamp} {source}[{tag}] ",
            "no_time": f"{source}[{tag}] ",
            "tag": f"[{tag}] ",
            "none": "",
        }.get(meta_mode, f"{stamp} {source}[{tag}] ")

        print(f"{color}{prefix}{msg}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system", meta_mode: str = "full"):
        """Initialization log. Empty message prints blank line."""
        if not msg.strip():
            if LoggerConfig.ENABLE_LOGGING:
                print()
            return
        DebugLogger._emit("init", msg, category, meta_mode)

    @staticmethod
    def system(msg: str, category: str = "system", meta_mode: str = "full"):
        DebugLogger._emit("system", msg, category, meta_mode)

    @staticmethod
    def state(msg: str, category: str = "system", meta_mode: str = "full"):
        DebugLogger._emit("state", msg, category, meta_mode)

    @staticmethod
    def action(msg: str, category: str = "system", meta_mode: str = "full"):
        DebugLogger._emit("action", msg, category, meta_mode)

    @staticmethod
    def trace(msg: str, category: str = "system", meta_mode: str = "full"):
        """Verbose log; only printed at LOG_LEVEL VERBOSE."""
        DebugLogger._emit("trace", msg, category, meta_mode)

    @staticmethod
    def warn(msg: str, category: str = "system", meta_mode: str = "full"):
        DebugLogger._emit("warn", msg, category, meta_mode)

    @staticmethod
    def fail(msg: str, category: str = "system", meta_mode: str = "full"):
        DebugLogger._emit("fail", msg, category, meta_mode)

    @staticmethod
    def throttled(key: str, msg: str, interval_s: float = 1.0, category: str = "system"):
        """
        Trace at most once per interval_s for a given key.

        Returns:
            bool: True if the message was emitted.
        """
        if not DebugLogger.enabled(category, "VERBOSE"):
            return False

        now = time.monotonic()
        last = DebugLogger._last_emit.get(key)
        if last is not None and now - last < interval_s:
            return False

        DebugLogger._last_emit[key] = now
        DebugLogger._emit("trace", msg, category)
        return True

    # ===========================================================
    # Boot Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a section header."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{Colors.WHITE}{rule}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Print '> Module ........ [OK]'."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        status_color = {"OK": Colors.GREEN, "LOADING": Colors.CYAN, "FAIL": Colors.RED}.get(
            status.upper(), Colors.WHITE
        )
        label = f"> {module}".ljust(30)
        badge = f"[{status}]"
        dots = "." * max(DebugLogger.LINE_LENGTH - len(label) - len(badge) - 1, 1)
        print(f"{Colors.WHITE}{label}{dots} {status_color}{badge}{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Print indented sub-detail."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{' ' * (level * 4)}• {Colors.WHITE}{detail}{Colors.RESET}")
