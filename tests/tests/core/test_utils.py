#!/usr/bin/env python3
import json
import re
from pathlib import Path
import pytest

from schemakit.core import utils


# --- Validation helpers --- #

@pytest.mark.parametrize("v,expected", [
    (1, True), (-3, True), (True, False), (1.0, False), ("1", False),
])
def test_is_integer(v, expected):
    assert utils.is_integer(v) is expected


@pytest.mark.parametrize("v,expected", [
    (1, True), (10 ** 400, True), (1.5, True), (float("inf"), False), (float("nan"), False), (False, False), (None, False),
])
def test_is_finite_number(v, expected):
    assert utils.is_finite_number(v) is expected


def test_is_string_sequence():
    assert utils.is_string_sequence(["a", "b"])
    assert utils.is_string_sequence(())
    assert not utils.is_string_sequence("ab")
    assert not utils.is_string_sequence(["a", 1])


# --- Pattern & identifier helpers --- #

@pytest.mark.parametrize("raw,expected", [
    ("abc", "^abc$"), ("^abc", "^abc$"), ("abc$", "^abc$"), ("^abc$", "^abc$"), ("", "^$"),
])
def test_anchor_pattern(raw, expected):
    assert utils.anchor_pattern(raw) == expected


def test_pattern_source():
    assert utils.pattern_source(re.compile("a+")) == "a+"
    assert utils.pattern_source("b") == "b"


@pytest.mark.parametrize("raw,expected", [
    ("user-account_id", "UserAccountId"),
    ("myShape", "MyShape"),
    ("a b", "AB"),
    ("", ""),
])
def test_to_string_id(raw, expected):
    assert utils.to_string_id(raw) == expected


# --- Generic utilities --- #

def test_merge_dicts_recursive():
    base = {"a": 1, "b": {"c": 2, "d": 3}}
    out = utils.merge_dicts(base, {"b": {"c": 20}, "e": 5})
    assert out == {"a": 1, "b": {"c": 20, "d": 3}, "e": 5}
    assert base["b"]["c"] == 2


# --- File I/O helpers --- #

def test_load_json_file(tmp_path: Path):
    p = tmp_path / "c.json"
    assert utils.load_json_file(p) == {}
    p.write_text(json.dumps({"x": 1}), encoding="utf-8")
    assert utils.load_json_file(p) == {"x": 1}
    p.write_text("{", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON"):
        utils.load_json_file(p)
