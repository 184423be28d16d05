"""
Defines the abstract syntax tree (AST) produced by the robots.txt parser.

Classes:
    Rule:
        Base class of the four rule lines. Each carries the verbatim value text.
    AllowRule, DisallowRule, CrawlDelayRule, SitemapRule:
        Concrete rule variants, one per rule directive.
    Config:
        One block of `User-agent` lines followed by the rules scoped to them.
    RobotsTxt:
        The document root, an ordered list of Config blocks.

    RuleDict, ConfigDict, RobotsTxtDict:
        TypedDict shapes returned by `to_dict()`, suitable for JSON output.

Nodes are plain values: they hold no reference to their parent or to the
tokens they came from, and compare structurally.

Example:
    RobotsTxt([Config(["*"], [DisallowRule("/admin")])])
"""

from __future__ import annotations

from typing import Any, ClassVar, TypedDict


class RuleDict(TypedDict):
    """Serialized rule, e.g. ``{"type": "AllowRule", "value": "/"}``."""

    type: str
    value: str


class ConfigDict(TypedDict):
    type: str
    userAgents: list[str]
    rules: list[RuleDict]


class RobotsTxtDict(TypedDict):
    type: str
    body: list[ConfigDict]


class Rule:
    """A single rule line inside a Config block.

    Attributes:
        type (str): Node type name, fixed per subclass (e.g. "AllowRule").
        value (str): Text of the rule's value token, not normalized or decoded.
    """

    type: ClassVar[str] = "Rule"

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{self.type}({self.value!r})"

    def __eq__(self, other: Any) -> bool:
        return type(self) is type(other) and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.type, self.value))

    def to_dict(self) -> RuleDict:
        return {"type": self.type, "value": self.value}


class AllowRule(Rule):
    __slots__ = ()
    type = "AllowRule"


class DisallowRule(Rule):
    __slots__ = ()
    type = "DisallowRule"


class CrawlDelayRule(Rule):
    __slots__ = ()
    type = "CrawlDelayRule"


class SitemapRule(Rule):
    __slots__ = ()
    type = "SitemapRule"


RULE_CLASSES: dict[str, type[Rule]] = {
    cls.type: cls for cls in (AllowRule, DisallowRule, CrawlDelayRule, SitemapRule)
}
"""Maps a rule node type name to its class."""


class Config:
    """A group of user agents and the rules that apply to them.

    Args:
        user_agents (list[str]): Agent names in source order. Duplicates are kept.
        rules (list[Rule], optional): Rules in source order.

    Raises:
        ValueError: If `user_agents` is empty.
    """

    type: ClassVar[str] = "Config"

    def __init__(self, user_agents: list[str], rules: list[Rule] | None = None):
        if not user_agents:
            raise ValueError("Config requires at least one user agent")
        self.user_agents: list[str] = user_agents
        self.rules: list[Rule] = rules or []

    def __repr__(self) -> str:
        preview = ", ".join(repr(r) for r in self.rules[:3])
        if len(self.rules) > 3:
            preview += ", ..."
        return f"Config(user_agents={self.user_agents!r}, rules=[{preview}])"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Config)
            and self.user_agents == other.user_agents
            and self.rules == other.rules
        )

    def rules_of(self, rule_type: type[Rule]) -> list[Rule]:
        """Returns this block's rules of the given class, in source order."""
        return [rule for rule in self.rules if type(rule) is rule_type]

    def to_dict(self) -> ConfigDict:
        return {
            "type": self.type,
            "userAgents": list(self.user_agents),
            "rules": [r.to_dict() for r in self.rules],
        }


class RobotsTxt:
    """Root node of a parsed robots.txt document.

    Attributes:
        body (list[Config]): Config blocks in source order. Empty for a
            document without directives.
    """

    type: ClassVar[str] = "RobotsTxt"

    def __init__(self, body: list[Config] | None = None):
        self.body: list[Config] = body or []

    def __repr__(self) -> str:
        return f"RobotsTxt(body={self.body!r})"

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, RobotsTxt) and self.body == other.body

    def sitemaps(self) -> list[str]:
        """Returns every sitemap value in the document, across all blocks."""
        return [
            rule.value
            for config in self.body
            for rule in config.rules_of(SitemapRule)
        ]

    def to_dict(self) -> RobotsTxtDict:
        return {"type": self.type, "body": [c.to_dict() for c in self.body]}


__all__ = [
    "AllowRule",
    "Config",
    "ConfigDict",
    "CrawlDelayRule",
    "DisallowRule",
    "RULE_CLASSES",
    "RobotsTxt",
    "RobotsTxtDict",
    "Rule",
    "RuleDict",
    "SitemapRule",
]
