"""Console colors for fleet CLI messages.

Provides ANSI color codes for terminal output with auto-detection
of TTY support and Windows compatibility.
"""

import os
import sys


class ConsoleColors:
    """ANSI color codes for terminal output.

    Colors are only emitted when stderr is a TTY and can be switched off
    globally with --no-color or the NO_COLOR environment variable.
    """

    RED = "\033[91m"
    YELLOW = "\033[93m"
    RESET = "\033[0m"

    # Messages go to stderr, so detect on that stream
    _enabled = sys.stderr.isatty() and (os.name != "nt" or bool(os.environ.get("TERM")))

    @classmethod
    def configure(cls, no_color: bool = False) -> None:
        """Apply the global color policy for this run."""
        if no_color or os.environ.get("NO_COLOR"):
            cls._enabled = False

    @classmethod
    def error(cls, text: str) -> str:
        """Format text as error (red)"""
        if cls._enabled:
            return f"{cls.RED}{text}{cls.RESET}"
        return text

    @classmethod
    def warning(cls, text: str) -> str:
        """Format text as warning (yellow)"""
        if cls._enabled:
            return f"{cls.YELLOW}{text}{cls.RESET}"
        return text
