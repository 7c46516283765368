"""
jlox Lexer Package

Implements the lexical scanner for the Lox scripting language.

Key Features:
- Single-pass character scan with one character of lookahead
- Maximal munch for two-character operators
- String and number literal decoding
- Exact-match keyword recognition
- Error recovery: every problem is recorded and scanning continues
- Line and column tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS
from .scanner import Scanner, ScanResult, scan_tokens, tokenize_string, tokenize_file
from .errors import LexerError, Diagnostic

__all__ = [
    "Scanner",
    "ScanResult",
    "scan_tokens",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "LexerError",
    "Diagnostic",
]
