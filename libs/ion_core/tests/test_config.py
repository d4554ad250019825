from pathlib import Path

from ionsym import IonConfig


def test_defaults(monkeypatch):
    monkeypatch.delenv("ION_CATALOG_PATH", raising=False)
    monkeypatch.delenv("ION_STRICT_IMPORTS", raising=False)
    cfg = IonConfig.from_env()
    assert cfg.catalog_path is None
    assert cfg.strict_imports is False


def test_from_env(monkeypatch):
    monkeypatch.setenv("ION_CATALOG_PATH", " /tmp/tables.json ")
    monkeypatch.setenv("ION_STRICT_IMPORTS", "TRUE")
    cfg = IonConfig.from_env()
    assert cfg.catalog_path == Path("/tmp/tables.json")
    assert cfg.strict_imports is True
