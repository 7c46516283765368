"""
jlox

A lexical scanner for the Lox scripting language, with a small command
line driver that scans files or an interactive prompt and prints tokens.

Architecture:
    jlox/
    ├── lexer/           # Tokens, scanner and lexical diagnostics
    ├── config.py        # Scanner settings
    ├── cli.py           # File and prompt driver
    └── utils/           # Logging helpers

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .config import ScannerConfig
from .lexer import (
    Scanner,
    ScanResult,
    Token,
    TokenType,
    SourceLocation,
    LexerError,
    scan_tokens,
    tokenize_string,
    tokenize_file,
)

__all__ = [
    # Core classes
    "Scanner",
    "ScanResult",
    "ScannerConfig",
    "Token",
    "TokenType",
    "SourceLocation",
    "LexerError",

    # Functions
    "scan_tokens",
    "tokenize_string",
    "tokenize_file",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
