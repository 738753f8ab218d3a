import logging

import pytest

from data_url_utils.utils.env import get_default_encoding
from data_url_utils.utils.log_config import LOG_LEVEL, logger


def test_default_encoding_is_utf8(monkeypatch):
    monkeypatch.delenv("DATA_URL_DEFAULT_ENCODING", raising=False)
    assert get_default_encoding() == "utf-8"


@pytest.mark.parametrize(
    "name, expected",
    [("UTF8", "utf-8"), ("latin1", "iso8859-1"), ("ascii", "ascii")],
)
def test_default_encoding_from_env(default_encoding, name: str, expected: str):
    default_encoding(name)
    assert get_default_encoding() == expected


def test_invalid_default_encoding(default_encoding):
    default_encoding("no-such-codec")

    with pytest.raises(Exception, match="DATA_URL_DEFAULT_ENCODING"):
        get_default_encoding()


def test_logger_level_from_env():
    assert logger.name == "data_url_utils"
    assert logger.level == logging.getLevelName(LOG_LEVEL)
