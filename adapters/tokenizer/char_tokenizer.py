"""
Adapter: CharTokenizer
Implements the Tokenizer port — a hand-written, character-level lexer with a
cursor over one input line.

Lexemes:
  NUMBER      — run of digits and '.', accumulated digit by digit
  IDENT       — letter followed by letters/digits; becomes an Assignment
                (when followed by '='), a Function (registry name) or a Variable
  SYMBOL      — one of + - * / ^ = ( )

Whitespace between lexemes is skipped. Only ASCII letters and digits are
accepted; everything else raises UnexpectedCharacterError.
"""
from __future__ import annotations

import string
from typing import Iterator

from adapters.operators import FUNCTIONS
from contracts import (
    AssignmentToken,
    EndToken,
    FunctionToken,
    NumberToken,
    OperatorToken,
    ParenthesisToken,
    Token,
    UnexpectedCharacterError,
    VariableToken,
)

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_IDENT_CHARS = _DIGITS | _LETTERS
_SYMBOLS = frozenset("+-*/^=()")


class CharTokenizer:
    """Pull-based lexer: every next_token() call consumes exactly one lexeme."""

    def __init__(self, text: str, position: int = 0) -> None:
        self.text = text
        self.position = position

    # -- Tokenizer protocol ------------------------------------------------

    def next_token(self) -> Token:
        self._skip_whitespace()

        if self._at_end():
            return EndToken()

        ch = self.text[self.position]

        if ch in _DIGITS or ch == ".":
            return self._number()

        if ch in _LETTERS:
            return self._identifier()

        if ch in _SYMBOLS:
            self.position += 1
            if ch in "()":
                return ParenthesisToken(symbol=ch)
            return OperatorToken(symbol=ch)

        raise UnexpectedCharacterError(ch)

    def remainder(self) -> str:
        return self.text[self.position:]

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if isinstance(token, EndToken):
                return
            yield token

    # -- Private -----------------------------------------------------------

    def _at_end(self) -> bool:
        return self.position >= len(self.text)

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self.text[self.position].isspace():
            self.position += 1

    def _number(self) -> NumberToken:
        value = 0.0
        seen_point = False
        decimals = 1  # power of ten for the next fractional digit

        while not self._at_end():
            ch = self.text[self.position]
            if ch == ".":
                # a second point is consumed and ignored
                seen_point = True
            elif ch in _DIGITS:
                digit = ord(ch) - ord("0")
                if not seen_point:
                    value = value * 10 + digit
                else:
                    value += digit * 10.0 ** -decimals
                    decimals += 1
            else:
                break
            self.position += 1

        return NumberToken(value=value)

    def _identifier(self) -> Token:
        start = self.position
        while not self._at_end() and self.text[self.position] in _IDENT_CHARS:
            self.position += 1
        name = self.text[start:self.position]

        self._skip_whitespace()
        if not self._at_end() and self.text[self.position] == "=":
            self.position += 1
            return AssignmentToken(name=name)

        if name in FUNCTIONS:
            return FunctionToken(name=name)
        return VariableToken(name=name)
