from __future__ import annotations

import os

import pytest

from mcprint.config import DEFAULT_WIDTH, PrinterTarget, load_target
from mcprint.errors import ConfigError


def test_defaults():
    assert load_target(environ={"PRINTER_HOST": "10.0.0.5"}) == PrinterTarget("10.0.0.5", 9100, DEFAULT_WIDTH)


def test_environment_values():
    environ = {"PRINTER_HOST": "10.0.0.5", "PRINTER_PORT": "9101", "PRINTER_WIDTH": "576"}
    assert load_target(environ=environ) == PrinterTarget("10.0.0.5", 9101, 576)


def test_arguments_override_environment():
    environ = {"PRINTER_HOST": "10.0.0.5", "PRINTER_PORT": "9101", "PRINTER_WIDTH": "576"}
    assert load_target("printer", 9200, 512, environ=environ) == PrinterTarget("printer", 9200, 512)


@pytest.mark.parametrize("value", ["wide", "0", "-8"])
def test_invalid_width_falls_back_to_default(value):
    target = load_target(environ={"PRINTER_HOST": "h", "PRINTER_WIDTH": value})
    assert target.width == DEFAULT_WIDTH


def test_missing_host():
    with pytest.raises(ConfigError):
        load_target(environ={})


def test_invalid_port():
    with pytest.raises(ConfigError):
        load_target(environ={"PRINTER_HOST": "h", "PRINTER_PORT": "raw"})


def test_non_positive_width_argument():
    with pytest.raises(ConfigError):
        load_target("h", width=0, environ={})


def test_dotenv_file_is_loaded(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("PRINTER_HOST", raising=False)
    monkeypatch.delenv("PRINTER_PORT", raising=False)
    monkeypatch.setenv("PRINTER_WIDTH", "512")
    (tmp_path / ".env").write_text("PRINTER_HOST=192.168.1.50\nPRINTER_WIDTH=576\n")
    try:
        target = load_target()
    finally:
        os.environ.pop("PRINTER_HOST", None)
    assert target == PrinterTarget("192.168.1.50", 9100, 512)
