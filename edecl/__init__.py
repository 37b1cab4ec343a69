"""Lexer, token types, spans and diagnostics for the edecl declaration language."""

__version__ = "0.1.0"
__all__ = ["diagnostics", "lexer", "spans", "tokens"]