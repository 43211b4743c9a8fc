#!/usr/bin/env python3
import pytest
from dataclasses import FrozenInstanceError

import schemakit.core.app_context as ac
from schemakit.core.compiler import JsonSchemaCompiler
from schemakit.core.errors import InvalidArgumentError
from schemakit.core.schema.factory import S


_CFG = {
    "compiler": {"all_errors": False, "use_defaults": False, "check_formats": True},
    "logging": {"level": "DEBUG", "json": True},
}


def test_build_context_uses_load_config_when_config_missing(monkeypatch):
    monkeypatch.setattr(ac, "load_config", lambda: _CFG)
    ctx = ac.build_context(configure_logs=False)

    assert ctx.config is _CFG
    assert isinstance(ctx.compiler, JsonSchemaCompiler)
    assert ctx.compiler.settings.all_errors is False
    assert ctx.compiler.settings.check_formats is True


def test_build_context_configures_logging_from_config(monkeypatch):
    calls = []
    monkeypatch.setattr(ac, "configure_logging", lambda level, json_format: calls.append((level, json_format)))
    ac.build_context(config=_CFG)
    assert calls == [("DEBUG", True)]


def test_build_context_skips_logging_when_disabled(monkeypatch):
    calls = []
    monkeypatch.setattr(ac, "configure_logging", lambda *a, **k: calls.append(a))
    ac.build_context(config=_CFG, configure_logs=False)
    assert calls == []


def test_explicit_compiler_is_kept():
    sentinel = JsonSchemaCompiler()
    ctx = ac.build_context(config=_CFG, compiler=sentinel, configure_logs=False)
    assert ctx.compiler is sentinel


def test_context_compiler_threads_into_compile():
    ctx = ac.build_context(config=_CFG, configure_logs=False)
    assert_valid = S.obj({"n": S.int.default(1).optional()}).compile("Ctx", ctx.compiler)
    value = {}
    assert_valid(value)
    # use_defaults is off in this context
    assert value == {}


def test_app_context_is_frozen():
    ctx = ac.build_context(config=_CFG, configure_logs=False)
    with pytest.raises(FrozenInstanceError):
        ctx.config = {}


def test_empty_config_is_used_as_given(monkeypatch):
    def _fail():
        raise AssertionError("load_config should not be called")
    monkeypatch.setattr(ac, "load_config", _fail)
    ctx = ac.build_context(config={}, configure_logs=False)
    assert ctx.config == {}
    assert ctx.compiler.settings.all_errors is True


def test_unknown_compiler_key_raises_invalid_argument():
    with pytest.raises(InvalidArgumentError, match="compiler"):
        ac.build_context(config={"compiler": {"all_erors": False}}, configure_logs=False)
