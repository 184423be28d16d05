"""
robots.txt Parser

Parses robots.txt tokens into a `RobotsTxt` abstract syntax tree.

The parser is a recursive-descent parser driven by a single token of lookahead.
It never backtracks and never re-reads the source text; each decision is taken
from the kind of the current token alone.

Grammar
-------
    RobotsTxt      := ConfigList
    ConfigList     := Config*
    Config         := UserAgentLine+ RuleLine*
    UserAgentLine  := USER_AGENT COLON VALUE
    RuleLine       := AllowLine | DisallowLine | CrawlDelayLine | SitemapLine
    AllowLine      := ALLOW COLON VALUE
    DisallowLine   := DISALLOW COLON VALUE
    CrawlDelayLine := CRAWL_DELAY COLON VALUE
    SitemapLine    := SITEMAP COLON VALUE

`Sitemap` lines are ordinary rules of the block they follow. A document must be
fully consumed by the ConfigList; anything left over is a syntax error.

Entry Points
------------
- `parse()`: Parse a robots.txt string into a `RobotsTxt`.
- `Parser(tokens).parse()`: Parse an already tokenized document.

Raises
------
RobotsSyntaxError
    Any of `UnexpectedEndOfInput`, `UnexpectedTokenError` or
    `NoRuleProductionError`. Errors are fatal; no partial tree is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from robots.robots_ast import RULE_CLASSES, Config, RobotsTxt, Rule
from robots.robots_constants import COLON, RULE_KINDS, USER_AGENT, VALUE
from robots.robots_errors import (
    NoRuleProductionError,
    RobotsSyntaxError,
    UnexpectedEndOfInput,
    UnexpectedTokenError,
)
from robots.robots_lexer import Token, generate_tokens

logger = logging.getLogger(__name__)


class Lookahead:
    """One-token buffered cursor over a token iterator.

    The cursor is primed with the first token on construction. `advance`
    replaces the buffered token with the next one from the iterator, or leaves
    the buffer empty once the iterator is exhausted.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = iter(tokens)
        self._token: Token | None = None
        self.advance()

    def current(self) -> Token:
        if self._token is None:
            raise UnexpectedEndOfInput()
        return self._token

    def has_more(self) -> bool:
        return self._token is not None

    def advance(self) -> Token | None:
        self._token = next(self._tokens, None)
        return self._token


class Parser:
    """
    robots.txt Parser Class

    Builds a `RobotsTxt` tree from a token sequence. The tokens may be any
    iterable, including the lazy sequence from `generate_tokens`; they are
    pulled one at a time through a `Lookahead`.

    Attributes
    ----------
    lookahead : Lookahead
        Cursor over the input tokens.

    Methods
    -------
    parse() -> RobotsTxt
        Parse the whole document.
    parse_config_list() -> list[Config]
        Parse consecutive Config blocks.
    parse_config() -> Config
        Parse one block of user agents and rules.
    parse_rule() -> Rule
        Parse one Allow/Disallow/Crawl-delay/Sitemap line.
    eat(kind) -> Token
        Consume a token of the given kind.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.lookahead = Lookahead(tokens)

    def current_is(self, *kinds: str) -> bool:
        return self.lookahead.has_more() and self.lookahead.current().type in kinds

    def eat(self, kind: str) -> Token:
        """Consume the current token, which must be of `kind`."""
        tok = self.lookahead.current()
        if tok.type != kind:
            raise UnexpectedTokenError(kind, tok.type, tok.position)
        self.lookahead.advance()
        return tok

    def parse_line(self, keyword: str) -> str:
        """Parse `keyword COLON VALUE` and return the value text."""
        self.eat(keyword)
        self.eat(COLON)
        return self.eat(VALUE).value

    def parse(self) -> RobotsTxt:
        """Parse a full robots.txt document."""
        try:
            body = self.parse_config_list()
            if self.lookahead.has_more():
                tok = self.lookahead.current()
                raise UnexpectedTokenError(None, tok.type, tok.position)
        except RobotsSyntaxError as e:
            logger.debug("robots.txt parse failed: %s", e)
            raise
        logger.debug("Parsed robots.txt with %d config block(s)", len(body))
        return RobotsTxt(body)

    def parse_config_list(self) -> list[Config]:
        configs: list[Config] = []
        while self.current_is(USER_AGENT):
            configs.append(self.parse_config())
        return configs

    def parse_config(self) -> Config:
        """Parse one or more User-agent lines followed by zero or more rules."""
        user_agents = [self.parse_line(USER_AGENT)]
        while self.current_is(USER_AGENT):
            user_agents.append(self.parse_line(USER_AGENT))

        rules: list[Rule] = []
        while self.current_is(*RULE_KINDS):
            rules.append(self.parse_rule())
        return Config(user_agents, rules)

    def parse_rule(self) -> Rule:
        """Parse one rule line into its AST node."""
        tok = self.lookahead.current()
        node_type = RULE_KINDS.get(tok.type)
        if node_type is None:
            raise NoRuleProductionError(tok.type, tok.position)
        return RULE_CLASSES[node_type](self.parse_line(tok.type))


def parse(source: str) -> RobotsTxt:
    """Parse a robots.txt document.

    Args:
        source: The entire document text.

    Returns:
        The document's AST.

    Raises:
        RobotsSyntaxError: If the document does not follow the grammar.
    """
    return Parser(generate_tokens(source)).parse()


__all__ = ["Lookahead", "Parser", "parse"]
