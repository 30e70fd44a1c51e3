import pytest

from pbstree import config as bst_config

_ENV_KEYS = ("PBSTREE_BACKEND", "PBSTREE_LOG_LEVEL", "PBSTREE_VALIDATE")


@pytest.fixture(autouse=True)
def _isolated_runtime_config(monkeypatch: pytest.MonkeyPatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    bst_config.reset_runtime_config_cache()
    yield
    bst_config.reset_runtime_config_cache()
