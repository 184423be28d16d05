from robots.robots_ast import (
    AllowRule,
    Config,
    CrawlDelayRule,
    DisallowRule,
    RobotsTxt,
    Rule,
    SitemapRule,
)
from robots.robots_errors import (
    NoRuleProductionError,
    RobotsSyntaxError,
    UnexpectedEndOfInput,
    UnexpectedTokenError,
)
from robots.robots_lexer import Lexer, Token, generate_tokens, tokenize
from robots.robots_parser import Parser, parse

__all__ = [
    "AllowRule",
    "Config",
    "CrawlDelayRule",
    "DisallowRule",
    "Lexer",
    "NoRuleProductionError",
    "Parser",
    "RobotsSyntaxError",
    "RobotsTxt",
    "Rule",
    "SitemapRule",
    "Token",
    "UnexpectedEndOfInput",
    "UnexpectedTokenError",
    "generate_tokens",
    "parse",
    "tokenize",
]
