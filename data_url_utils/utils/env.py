import codecs
import os

DEFAULT_ENCODING_ENV = "DATA_URL_DEFAULT_ENCODING"


def get_default_encoding() -> str:
    name = os.getenv(DEFAULT_ENCODING_ENV, "utf-8")
    try:
        return codecs.lookup(name).name
    except LookupError:
        raise Exception(
            f"{DEFAULT_ENCODING_ENV} env variable is invalid: {name}"
        )
