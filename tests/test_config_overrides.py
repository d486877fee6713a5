"""``--set SECTION.KEY=VALUE`` stories: parsing, coercion, and merging into Config."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from lib_layered_config import Config

from markdown_echarts.adapters.config.overrides import (
    ConfigOverride,
    apply_overrides,
    coerce_value,
    parse_override,
)

IDENTIFIERS = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,10}", fullmatch=True)
PRINTABLE = st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=40)

# ======================== parse_override ========================


@pytest.mark.os_agnostic
def test_parse_override_splits_section_and_key_path() -> None:
    result = parse_override("echarts.defaults.title.left=center")

    assert result == ConfigOverride(section="echarts", key_path=("defaults", "title", "left"), value="center")
    assert result.dotted_key == "echarts.defaults.title.left"


@pytest.mark.os_agnostic
def test_parse_override_coerces_json_values() -> None:
    assert parse_override("echarts.throw_on_error=true").value is True
    assert parse_override('echarts.defaults={"color": ["red"]}').value == {"color": ["red"]}


@pytest.mark.os_agnostic
def test_parse_override_keeps_equals_signs_inside_the_value() -> None:
    assert parse_override("echarts.script_url=/echarts.js?v=5").value == "/echarts.js?v=5"


@pytest.mark.os_agnostic
def test_parse_override_keeps_an_empty_value() -> None:
    assert parse_override("echarts.script_url=").value == ""


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("echarts.verbose", "missing '='"),
        ("echarts=1", "expected SECTION.KEY=VALUE"),
        ("=1", "expected SECTION.KEY=VALUE"),
        (".verbose=1", "empty key segment"),
        ("echarts..verbose=1", "empty key segment"),
        ("echarts.verbose.=1", "empty key segment"),
    ],
)
def test_parse_override_rejects_malformed_assignments(raw: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parse_override(raw)


# ======================== coerce_value ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("false", False),
        ("null", None),
        ("42", 42),
        ("-3.5", -3.5),
        ('["a", "b"]', ["a", "b"]),
        ('"quoted"', "quoted"),
        ("center", "center"),
        ("hello world", "hello world"),
        ("", ""),
    ],
)
def test_coerce_value_reads_json_or_keeps_text(raw: str, expected: Any) -> None:
    assert coerce_value(raw) == expected


@pytest.mark.os_agnostic
@given(raw=PRINTABLE)
@settings(max_examples=200)
def test_coerce_value_never_raises(raw: str) -> None:
    assert isinstance(coerce_value(raw), (str, int, float, bool, type(None), list, dict))


@pytest.mark.os_agnostic
@given(value=st.integers(min_value=-(2**53), max_value=2**53))
def test_integers_survive_coercion(value: int) -> None:
    assert coerce_value(str(value)) == value


@pytest.mark.os_agnostic
@given(section=IDENTIFIERS, keys=st.lists(IDENTIFIERS, min_size=1, max_size=4), value=PRINTABLE)
@settings(max_examples=200)
def test_well_formed_assignments_always_parse(section: str, keys: list[str], value: str) -> None:
    result = parse_override(f"{section}.{'.'.join(keys)}={value}")

    assert result.section == section
    assert result.key_path == tuple(keys)
    assert result.value == coerce_value(value)


# ======================== apply_overrides ========================


def _config(data: dict[str, Any]) -> Config:
    return Config(data, {})


@pytest.mark.os_agnostic
def test_apply_overrides_without_assignments_returns_the_same_config() -> None:
    config = _config({"echarts": {"verbose": False}})

    assert apply_overrides(config, ()) is config


@pytest.mark.os_agnostic
def test_apply_overrides_merges_into_existing_sections() -> None:
    config = _config({"echarts": {"verbose": False, "script_url": "/kept.js"}})

    result = apply_overrides(config, ("echarts.verbose=true",))

    assert result["echarts"] == {"verbose": True, "script_url": "/kept.js"}


@pytest.mark.os_agnostic
def test_apply_overrides_creates_nested_tables() -> None:
    config = _config({"echarts": {"defaults": {"color": ["red"]}}})

    result = apply_overrides(config, ("echarts.defaults.title.left=center",))

    assert result["echarts"]["defaults"] == {"color": ["red"], "title": {"left": "center"}}


@pytest.mark.os_agnostic
def test_later_assignments_to_the_same_key_win() -> None:
    result = apply_overrides(_config({}), ("echarts.verbose=true", "echarts.verbose=false"))

    assert result["echarts"]["verbose"] is False


@pytest.mark.os_agnostic
def test_apply_overrides_leaves_the_original_untouched() -> None:
    config = _config({"lib_log_rich": {"console_level": "INFO"}})

    result = apply_overrides(config, ("lib_log_rich.console_level=DEBUG",))

    assert config["lib_log_rich"]["console_level"] == "INFO"
    assert result["lib_log_rich"]["console_level"] == "DEBUG"


@pytest.mark.os_agnostic
def test_assignment_below_a_scalar_override_is_rejected() -> None:
    with pytest.raises(ValueError, match="non-table"):
        apply_overrides(_config({}), ("echarts.defaults=1", "echarts.defaults.title.left=center"))


@pytest.mark.os_agnostic
def test_malformed_assignment_fails_the_whole_batch() -> None:
    with pytest.raises(ValueError, match="missing '='"):
        apply_overrides(_config({}), ("echarts.verbose=true", "broken"))
