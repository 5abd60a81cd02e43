"""
Port: Tokenizer
Responsibility: lazy, pull-based lexing of one input line into tokens.
"""
from typing import Iterator, Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Tokenizer(Protocol):
    position: int

    def next_token(self) -> Token:
        """
        Returns the next token and advances `position` past its lexeme.
        Returns EndToken once the input is exhausted (repeatedly, if asked again).
        Raises UnexpectedCharacterError for characters outside the grammar.
        """
        ...

    def remainder(self) -> str:
        """Returns the not yet consumed part of the line."""
        ...

    def __iter__(self) -> Iterator[Token]:
        """Yields tokens up to, but not including, EndToken."""
        ...
