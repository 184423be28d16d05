import json

import hypothesis.strategies as st
import pytest
from hypothesis import given

from robots.robots_ast import (
    RULE_CLASSES,
    AllowRule,
    Config,
    CrawlDelayRule,
    DisallowRule,
    RobotsTxt,
    SitemapRule,
)


def test_rule_repr() -> None:
    assert repr(AllowRule("/")) == "AllowRule('/')"


def test_rule_eq_same_variant() -> None:
    assert DisallowRule("/x") == DisallowRule("/x")


def test_rule_eq_different_variant() -> None:
    assert AllowRule("/x") != DisallowRule("/x")


def test_rule_eq_different_value() -> None:
    assert AllowRule("/x") != AllowRule("/y")


def test_rule_classes_by_type_name() -> None:
    assert RULE_CLASSES == {
        "AllowRule": AllowRule,
        "DisallowRule": DisallowRule,
        "CrawlDelayRule": CrawlDelayRule,
        "SitemapRule": SitemapRule,
    }


def test_config_repr_truncates_rules() -> None:
    config = Config(["*"], [AllowRule(str(i)) for i in range(5)])
    assert repr(config) == (
        "Config(user_agents=['*'], rules=[AllowRule('0'), AllowRule('1'), AllowRule('2'), ...])"
    )


def test_config_eq() -> None:
    assert Config(["a"], [AllowRule("/")]) == Config(["a"], [AllowRule("/")])
    assert Config(["a"], [AllowRule("/")]) != Config(["b"], [AllowRule("/")])
    assert Config(["a"]) == Config(["a"], [])
    assert Config(["a"]) != "Config"


def test_config_rules_of() -> None:
    config = Config(
        ["*"], [AllowRule("/a"), DisallowRule("/b"), AllowRule("/c"), CrawlDelayRule("1")]
    )
    assert config.rules_of(AllowRule) == [AllowRule("/a"), AllowRule("/c")]
    assert config.rules_of(SitemapRule) == []


def test_robots_txt_sitemaps_in_source_order() -> None:
    tree = RobotsTxt(
        [
            Config(["a"], [SitemapRule("https://a.example/s.xml")]),
            Config(["b"], [AllowRule("/")]),
            Config(["c"], [SitemapRule("https://c.example/s.xml")]),
        ]
    )
    assert tree.sitemaps() == ["https://a.example/s.xml", "https://c.example/s.xml"]


def test_robots_txt_to_dict_is_json_ready() -> None:
    tree = RobotsTxt([Config(["Google"], [CrawlDelayRule("10")])])
    d = tree.to_dict()
    assert json.loads(json.dumps(d)) == {
        "type": "RobotsTxt",
        "body": [
            {
                "type": "Config",
                "userAgents": ["Google"],
                "rules": [{"type": "CrawlDelayRule", "value": "10"}],
            }
        ],
    }


def test_to_dict_copies_user_agents() -> None:
    config = Config(["a"])
    config.to_dict()["userAgents"].append("b")
    assert config.user_agents == ["a"]


@given(st.sampled_from(list(RULE_CLASSES.values())), st.text())  # type: ignore[misc]
def test_rule_to_dict_type_tag(rule_cls: type, value: str) -> None:
    rule = rule_cls(value)
    assert rule.to_dict() == {"type": rule_cls.type, "value": value}
    assert hash(rule) == hash(rule_cls(value))


def test_rule_value_is_read_only() -> None:
    rule = AllowRule("/")
    with pytest.raises(AttributeError):
        rule.value = "/x"  # type: ignore[misc]
    assert {rule} == {AllowRule("/")}


def test_config_requires_a_user_agent() -> None:
    with pytest.raises(ValueError, match="at least one user agent"):
        Config([])
