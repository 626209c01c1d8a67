"""String utilities, format-specification parsing and rendering, a generic lexer and numeral helpers."""

__version__ = "0.1.0"

__all__ = ["formatbuilder", "formatspec", "lexer", "numerals", "stringutils"]