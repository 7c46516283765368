"""
Error handling for the Lox scanner.

Lexical problems are reported as data: the scanner records a LexerError for
each one and keeps going, so a single pass collects every problem in the
input. The strict convenience API raises the first recorded error instead.

Author: xwest
"""

from typing import Dict, List, Optional
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A lexical problem at a source location."""
    message: str
    location: SourceLocation
    severity: str  # "error" or "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result

    def short(self) -> str:
        """One-line form used by the command line driver."""
        return f"[line {self.location.line}] {self.severity.capitalize()}: {self.message}"


class LexerError(Exception):
    """
    A lexical error with its diagnostic.

    The scanner collects these without raising them; tokenize_string()
    raises the first one.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
    "L003": "Invalid numeric literal",
    "L007": "Number literal overflow",
}

# Operators people bring over from other languages
_LOX_SPELLINGS: Dict[str, List[str]] = {
    "&": ["and"],
    "|": ["or"],
    "?": ["if", "else"],
    "'": ['"'],
}


def suggest_lox_spelling(char: str) -> List[str]:
    """Suggest the Lox way of writing a character that Lox does not use."""
    return _LOX_SPELLINGS.get(char, [])


# Helper functions for creating common errors
def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that starts no token."""
    suggestions = suggest_lox_spelling(char)

    if suggestions:
        quoted = ", ".join(f"'{s}'" for s in suggestions)
        help_text = f"Lox has no '{char}'; did you mean {quoted}?"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Unexpected character: {char!r}",
        location=location,
        code="L001",
        help_text=help_text,
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string literal that reaches end of input."""
    return LexerError(
        message="Unterminated string",
        location=location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
    )


def create_invalid_number_error(lexeme: str, location: SourceLocation, reason: str) -> LexerError:
    """Create an error for a numeric literal that cannot be parsed."""
    return LexerError(
        message=f"Invalid numeric literal: '{lexeme}'",
        location=location,
        code="L003",
        help_text=reason,
    )


def create_number_overflow_error(lexeme: str, location: SourceLocation) -> LexerError:
    """Create an error for a numeric literal too large for a float."""
    shown = lexeme if len(lexeme) <= 20 else lexeme[:17] + "..."
    return LexerError(
        message=f"Number literal overflow: '{shown}'",
        location=location,
        code="L007",
        help_text="The value does not fit in a double-precision float.",
    )
