"""
Lox Scanner - turns source text into tokens

A single left-to-right pass over the source with one character of
lookahead. Every character class is handled inside scan_token(); strings
and comments look ahead until their terminator.

Problems in the input never stop the scan. They are recorded as LexerError
values on the scanner and the caller decides what to do with them.

xwest
"""

import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, SINGLE_CHAR_TOKENS,
    ONE_OR_TWO_CHAR_TOKENS
)
from .errors import (
    LexerError, create_invalid_character_error, create_unterminated_string_error,
    create_invalid_number_error, create_number_overflow_error
)
from ..config import ScannerConfig, DEFAULT_CONFIG
from ..utils.logger import get_logger

logger = get_logger(__name__)

WHITESPACE = frozenset(" \r\t")


def is_digit(char: str) -> bool:
    """ASCII 0-9. False for the empty string."""
    return len(char) == 1 and "0" <= char <= "9"


def is_alpha(char: str) -> bool:
    """ASCII letter or underscore. False for the empty string."""
    return len(char) == 1 and ("a" <= char <= "z" or "A" <= char <= "Z" or char == "_")


def is_alphanumeric(char: str) -> bool:
    return is_digit(char) or is_alpha(char)


class Scanner:
    """
    Lox lexical analyzer.

    Holds the source text, a cursor pair (start of the token being scanned
    and current position) and the running line number.
    """

    def __init__(self, source: str, config: Optional[ScannerConfig] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text
            config: Scanner settings; defaults to DEFAULT_CONFIG
        """
        self.source = source
        self.config = config or DEFAULT_CONFIG
        self.filename = self.config.filename
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []
        self._reset()

    def _reset(self):
        self.start = 0
        self.current = 0
        self.line = self.config.first_line
        # Offset of the first character of the current line
        self.line_start = 0
        self.start_line = self.line
        self.start_column = 1
        self.tokens = []
        self.errors = []

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens, always ending with an EOF token
        """
        self._reset()
        logger.debug("Scanning %s (%d characters)", self.filename, len(self.source))

        while not self._is_at_end():
            self.start = self.current
            self.start_line = self.line
            self.start_column = self.current - self.line_start + 1
            self.scan_token()

        self.start = self.current
        self.tokens.append(Token(TokenType.EOF, "", None, self._cursor_location()))

        logger.debug(
            "Scanned %s: %d tokens, %d errors",
            self.filename, len(self.tokens), len(self.errors)
        )
        return self.tokens

    def scan_token(self):
        """Consume one lexical unit starting at the cursor."""
        char = self._advance()
        if not char:
            return

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in ONE_OR_TWO_CHAR_TOKENS:
            single, double = ONE_OR_TWO_CHAR_TOKENS[char]
            self._add_token(double if self._match("=") else single)
        elif char == "/":
            if self._match("/"):
                # Line comment runs up to, not including, the newline
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char == "\n":
            self._newline()
        elif char in WHITESPACE:
            pass
        elif char == '"':
            self._string()
        elif is_digit(char):
            self._number()
        elif is_alpha(char):
            self._identifier()
        else:
            self.errors.append(
                create_invalid_character_error(char, self._token_location())
            )

    def _string(self):
        """Scan a string literal; the opening quote is already consumed."""
        while self._peek() != '"' and not self._is_at_end():
            if self._advance() == "\n":
                self._newline()

        if self._is_at_end():
            self.errors.append(create_unterminated_string_error(self._token_location()))
            return

        self._advance()  # Closing quote
        self._add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def _number(self):
        """Scan a decimal literal with at most one fractional part."""
        while is_digit(self._peek()):
            self._advance()

        # A '.' only belongs to the number when a digit follows it
        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        lexeme = self.source[self.start:self.current]
        try:
            value = float(lexeme)
        except ValueError:
            self.errors.append(create_invalid_number_error(
                lexeme, self._token_location(), "Cannot parse floating-point number"
            ))
            return

        if not math.isfinite(value):
            self.errors.append(create_number_overflow_error(lexeme, self._token_location()))
            return

        self._add_token(TokenType.NUMBER, value)

    def _identifier(self):
        """Scan an identifier or reserved word."""
        while is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _add_token(self, token_type: TokenType, literal=None):
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, lexeme, literal, self._token_location()))

    def _token_location(self) -> SourceLocation:
        """Location of the token currently being scanned."""
        return SourceLocation(self.filename, self.start_line, self.start_column, self.start)

    def _cursor_location(self) -> SourceLocation:
        return SourceLocation(
            self.filename, self.line, self.current - self.line_start + 1, self.current
        )

    def _newline(self):
        self.line += 1
        self.line_start = self.current

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        """Consume and return the current character, or "" at end of input."""
        if self._is_at_end():
            return ""
        char = self.source[self.current]
        self.current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it equals expected."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return ""
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return ""
        return self.source[self.current + 1]

    def has_errors(self) -> bool:
        """Check if the last scan recorded any errors."""
        return len(self.errors) > 0


@dataclass(frozen=True)
class ScanResult:
    """Tokens and errors produced by one scan."""
    tokens: Tuple[Token, ...]
    errors: Tuple[LexerError, ...]

    @property
    def had_error(self) -> bool:
        return len(self.errors) > 0

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)


def scan_tokens(source: str, config: Optional[ScannerConfig] = None) -> ScanResult:
    """
    Scan a source string into tokens and errors.

    Never raises for lexical problems; check ScanResult.had_error.
    """
    scanner = Scanner(source, config)
    tokens = scanner.scan_tokens()
    return ScanResult(tuple(tokens), tuple(scanner.errors))


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: The first error, if scanning recorded any
    """
    scanner = Scanner(source, ScannerConfig(filename=filename))
    tokens = scanner.scan_tokens()

    if scanner.has_errors():
        raise scanner.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to a UTF-8 source file

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning records an error
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, str(filepath))
