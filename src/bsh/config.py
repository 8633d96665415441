"""
bsh Configuration
=================

Settings for the tools built on top of the scanner. Configuration can come
from:
- Default values (defined here)
- Environment variables
- Command-line options, applied by the caller on top of the above

None of these settings change how source text is tokenized: the token
vocabulary and recognition rules are fixed.
"""

from dataclasses import dataclass
import logging
import os


TRUTHY_VALUES = ("1", "true", "yes", "on")


@dataclass
class ScannerConfig:
    """
    Configuration for reading and reporting on bsh sources.

    Attributes:
        encoding: Text encoding used to open source files (default: "utf-8")
        log_level: Logging level name for the tools (default: "WARNING")
        strict: Treat the first ILLEGAL token as an error (default: False)
    """

    encoding: str = "utf-8"
    log_level: str = "WARNING"
    strict: bool = False

    # ═══════════════════════════════════════════════════════════════════════════
    # FACTORY METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @classmethod
    def from_env(cls) -> "ScannerConfig":
        """
        Create ScannerConfig from environment variables.

        Environment variables (all optional):
            BSH_ENCODING: Source file encoding (e.g., "latin-1")
            BSH_LOG_LEVEL: Logging level name (e.g., "DEBUG")
            BSH_STRICT: Enable strict mode (1, true, yes, on)

        Returns:
            ScannerConfig with values from environment variables
        """
        config = cls()

        if encoding := os.environ.get("BSH_ENCODING"):
            config.encoding = encoding

        if log_level := os.environ.get("BSH_LOG_LEVEL"):
            # Unknown level names are ignored
            if isinstance(logging.getLevelName(log_level.upper()), int):
                config.log_level = log_level.upper()

        if strict := os.environ.get("BSH_STRICT"):
            config.strict = strict.strip().lower() in TRUTHY_VALUES

        return config

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPER METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @property
    def log_level_value(self) -> int:
        """The numeric logging level for log_level."""
        return logging.getLevelName(self.log_level)
