"""
Scanner configuration.

A ScannerConfig is immutable and passed explicitly to each Scanner, so
concurrent scans never share settings.

Usage:
    config = ScannerConfig(filename="script.lox")
    result = scan_tokens(source, config)

    # From a plain mapping (unknown keys are ignored)
    config = ScannerConfig.from_dict({"filename": "repl", "first_line": 0})
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class ScannerConfig:
    """Immutable scanner settings.

    Attributes:
        filename: Name reported in token and diagnostic locations
        first_line: Number given to the first line of the source. Lines are
            1-based by default; 0 gives the 0-based numbering some drivers use.
    """

    filename: str = "<string>"
    first_line: int = 1

    def __post_init__(self):
        if not isinstance(self.first_line, int) or isinstance(self.first_line, bool):
            raise ValueError(f"first_line must be an int, got {self.first_line!r}")
        if self.first_line < 0:
            raise ValueError(f"first_line must be >= 0, got {self.first_line}")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ScannerConfig":
        """Create a ScannerConfig from a mapping, ignoring unknown keys."""
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


DEFAULT_CONFIG = ScannerConfig()
