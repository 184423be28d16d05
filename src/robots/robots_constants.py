"""
Token kinds and lexical rules for robots.txt documents.

The tokenizer walks `TOKEN_SPEC` in order at every cursor position and keeps the
first pattern that matches. The order is significant:

    - `disallow` is tried before `allow` so it is not read as `dis` + `allow`
    - the URL pattern is tried before the generic value pattern so that the
      `:` inside `https://` does not end a sitemap value early

Exports:
    - NULL, USER_AGENT, ALLOW, DISALLOW, CRAWL_DELAY, SITEMAP, VALUE, COLON
    - TOKEN_KINDS
    - TOKEN_SPEC
    - RULE_KINDS
"""

import re

# Internal kind for skippable input. Never emitted.
NULL = "NULL"

USER_AGENT = "USER_AGENT"
ALLOW = "ALLOW"
DISALLOW = "DISALLOW"
CRAWL_DELAY = "CRAWL_DELAY"
SITEMAP = "SITEMAP"
VALUE = "VALUE"
COLON = "COLON"

TOKEN_KINDS: frozenset[str] = frozenset(
    {USER_AGENT, ALLOW, DISALLOW, CRAWL_DELAY, SITEMAP, VALUE, COLON}
)

_URL_PATTERN = (
    r"https?://(www\.)?[-a-zA-Z0-9@:%._\+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b"
    r"([-a-zA-Z0-9()@:%_\+.~#?&/=]*)"
)

TokenSpec = tuple[re.Pattern[str], str]

# A leading byte-order mark is skipped like whitespace. The URL pattern uses
# ASCII word boundaries.
TOKEN_SPEC: tuple[TokenSpec, ...] = (
    (re.compile(r"[\s\ufeff]+"), NULL),
    (re.compile(r"user-agent", re.IGNORECASE), USER_AGENT),
    (re.compile(r"disallow", re.IGNORECASE), DISALLOW),
    (re.compile(r"allow", re.IGNORECASE), ALLOW),
    (re.compile(r"crawl-delay", re.IGNORECASE), CRAWL_DELAY),
    (re.compile(r"sitemap", re.IGNORECASE), SITEMAP),
    (re.compile(_URL_PATTERN, re.ASCII), VALUE),
    (re.compile(r"(?:[^:\s\ufeff]|/)+"), VALUE),
    (re.compile(r"\*"), VALUE),
    (re.compile(r":"), COLON),
)

# Keyword kinds that may start a rule line, mapped to the AST node type they build.
RULE_KINDS: dict[str, str] = {
    ALLOW: "AllowRule",
    DISALLOW: "DisallowRule",
    CRAWL_DELAY: "CrawlDelayRule",
    SITEMAP: "SitemapRule",
}
