"""
Lexical analyzer for robots.txt documents.

This module turns raw robots.txt text into a lazy stream of classified tokens:

Classes:
    Token: A single token with kind, verbatim text, and source offset.
    Lexer: Iterator that produces tokens on demand from a text buffer.

Functions:
    generate_tokens: Lazy token sequence for a document.
    tokenize: Eager list of all tokens for a document.

Features:
    - Skips whitespace runs
    - Recognizes the directive keywords case-insensitively, keeping their text
    - Captures sitemap URLs whole, including the `:` of the scheme
    - First-match-wins rule table (see `robots_constants.TOKEN_SPEC`)

The lexer never raises. When no rule matches at the cursor it stops producing
tokens and the remainder of the input is dropped.

Example:
    >>> tokenize("User-agent: *")
    [Token(USER_AGENT, User-agent), Token(COLON, :), Token(VALUE, *)]
"""

import logging
from collections.abc import Iterator, Sequence
from typing import Any

from robots.robots_constants import NULL, TOKEN_SPEC, TokenSpec

logger = logging.getLogger(__name__)


class Token:
    """Represents a single lexical token of a robots.txt document.

    Attributes:
        type (str): The token kind (e.g. 'USER_AGENT', 'VALUE', 'COLON').
        value (str): The matched source text, unmodified.
        position (int): Zero-based offset of the token's first character.
    """

    __slots__ = ("_type", "_value", "_position")

    def __init__(self, type_: str, value: str, position: int = 0):
        self._type = type_
        self._value = value
        self._position = position

    @property
    def type(self) -> str:
        return self._type

    @property
    def value(self) -> str:
        return self._value

    @property
    def position(self) -> int:
        return self._position

    def __repr__(self) -> str:
        return f"Token({self._type}, {self._value})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self._type == other._type
            and self._value == other._value
            and self._position == other._position
        )

    def __hash__(self) -> int:
        return hash((self._type, self._value, self._position))


class Lexer:
    """Pull-based tokenizer over a robots.txt string.

    Each call to `next_token` scans from the cursor, skipping whitespace, and
    returns the next token or None once the input is exhausted or no rule
    matches. The lexer is also an iterator, so it can be consumed with `for`
    or `list()`. It cannot be restarted.

    Attributes:
        source (str): The input text.
        position (int): Current cursor offset into `source`.
        spec (Sequence[TokenSpec]): Ordered (pattern, kind) rules.
    """

    def __init__(self, source: str, spec: Sequence[TokenSpec] = TOKEN_SPEC) -> None:
        self.source = source
        self.position = 0
        self.spec = spec
        self._done = False

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def match_rule(self) -> Token | None:
        """Returns the token of the first rule matching at the cursor, if any.

        The returned token may be of kind NULL; the cursor is not moved.
        """
        for pattern, kind in self.spec:
            m = pattern.match(self.source, self.position)
            if m is not None and m.group(0):
                return Token(kind, m.group(0), self.position)
        return None

    def next_token(self) -> Token | None:
        """Consumes and returns the next Token, or None when no more are produced."""
        while not self._done and self.position < len(self.source):
            token = self.match_rule()
            if token is None:
                logger.debug(
                    "No token rule matches at offset %d (%r); dropping remaining input",
                    self.position,
                    self.source[self.position : self.position + 20],
                )
                break
            self.position += len(token.value)
            if token.type == NULL:
                continue
            return token

        self._done = True
        return None


def generate_tokens(source: str) -> Lexer:
    """Returns the lazy token sequence for `source`."""
    return Lexer(source)


def tokenize(source: str) -> list[Token]:
    """Tokenizes `source` eagerly.

    Args:
        source: The full robots.txt document.

    Returns:
        Every token `generate_tokens(source)` would yield, in order.
    """
    return list(generate_tokens(source))


__all__ = ["Lexer", "Token", "generate_tokens", "tokenize"]
