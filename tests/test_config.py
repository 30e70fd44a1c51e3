import pytest

from pbstree import config as bst_config


def test_runtime_config_defaults():
    runtime = bst_config.runtime_config()

    assert runtime.backend == "linked"
    assert runtime.log_level == "INFO"
    assert runtime.validate_inserts is False
    assert runtime.uses_arena is False


def test_backend_override(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PBSTREE_BACKEND", " Arena ")
    bst_config.reset_runtime_config_cache()

    runtime = bst_config.runtime_config()

    assert runtime.backend == "arena"
    assert runtime.uses_arena is True


def test_invalid_backend(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PBSTREE_BACKEND", "invalid-backend")
    bst_config.reset_runtime_config_cache()

    with pytest.raises(ValueError):
        bst_config.runtime_config()


def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PBSTREE_LOG_LEVEL", "chatty")
    bst_config.reset_runtime_config_cache()

    with pytest.raises(ValueError):
        bst_config.runtime_config()


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("yes", True), ("ON", True), ("0", False), ("off", False), ("maybe", False)],
)
def test_validate_flag_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool):
    monkeypatch.setenv("PBSTREE_VALIDATE", raw)
    bst_config.reset_runtime_config_cache()

    assert bst_config.runtime_config().validate_inserts is expected


def test_runtime_config_is_cached():
    assert bst_config.runtime_config() is bst_config.runtime_config()
