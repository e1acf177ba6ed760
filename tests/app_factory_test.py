"""App construction: importing the module builds nothing; `app` is built once on demand."""

import pytest
from flask import Flask

import app as app_module


def test_import_does_not_build_default_app():
    assert "app" not in vars(app_module)


def test_default_app_built_once_from_environment(monkeypatch, settings):
    calls = []

    def fake_load_settings():
        calls.append(1)
        return settings

    monkeypatch.setattr(app_module, "_default_app", None)
    monkeypatch.setattr(app_module, "load_settings", fake_load_settings)

    first = app_module.app
    second = app_module.app
    assert isinstance(first, Flask)
    assert first is second
    assert first.config["SETTINGS"] is settings
    assert calls == [1]


def test_unknown_module_attribute_still_raises():
    with pytest.raises(AttributeError):
        app_module.not_a_real_attribute
