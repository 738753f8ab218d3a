from typing import Optional

from data_url_utils.utils.text import truncate_string


class DataUrlError(Exception):
    """
    Base class for the errors raised while handling data URLs.
    """

    message: str

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ParseError(DataUrlError):
    """
    The parse errors report a string that is not a well-formed data URL (RFC 2397):

    * `data_url` is the original input (`None` when the input was absent),
    * `reason` explains which part of the input is malformed.

    Parsing never looks inside the payload, so an invalid base64 payload
    is not a parse error. See `DecodeError`.
    """

    data_url: Optional[str]
    reason: str

    def __init__(self, data_url: Optional[str], reason: str):
        self.data_url = data_url
        self.reason = reason
        super().__init__(
            f'{reason} (data_url="{truncate_string(str(data_url), n=100)}")'
        )


class DecodeError(DataUrlError):
    """
    The decode errors are raised lazily, when the content of a data URL is read.

    Typically the content is flagged as base64, but isn't valid base64 text,
    or the decoded bytes can't be converted to a string with the requested encoding.
    """

    content_type: str

    def __init__(self, message: str, content_type: str):
        self.content_type = content_type
        super().__init__(message)
