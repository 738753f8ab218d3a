import pytest


@pytest.fixture
def default_encoding(monkeypatch):
    def set_default_encoding(name: str):
        monkeypatch.setenv("DATA_URL_DEFAULT_ENCODING", name)

    return set_default_encoding
