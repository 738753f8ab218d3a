from typing import List, Optional, Tuple

from data_url_utils.data_url import DataUrl, Parameter
from data_url_utils.errors import ParseError
from data_url_utils.utils.codec import ascii_bytes, percent_decode
from data_url_utils.utils.log_config import logger

_PREFIX = "data:"
_BASE64_FLAG = "base64"


def _parse_header_item(item: str) -> Tuple[str, str]:
    key, _, value = item.partition("=")
    return key.strip(), value.strip()


def _parse_header(header: str) -> Tuple[str, bool, List[Parameter]]:
    content_type, *items = header.split(";")

    is_base64_encoded = False
    parameters: List[Parameter] = []
    for item in items:
        key, value = _parse_header_item(item)
        # The flag is matched before percent-decoding
        if key.lower() == _BASE64_FLAG:
            is_base64_encoded = True
        else:
            parameters.append((percent_decode(key), percent_decode(value)))

    return content_type, is_base64_encoded, parameters


def parse(data_url: Optional[str]) -> DataUrl:
    """
    Parse a data URL (RFC 2397):

        data:[<mediatype>][;base64][;<key>=<value>]*,<data>

    The media type is kept verbatim, parameter keys and values are percent-decoded
    and the data is kept as is: neither percent-decoded nor base64-decoded.
    """
    if data_url is None:
        raise ParseError(data_url, "Data URL is missing")

    if not isinstance(data_url, str):
        raise ParseError(data_url, "Data URL must be a string")

    if data_url[: len(_PREFIX)].lower() != _PREFIX:
        raise ParseError(data_url, "Data URL does not begin with 'data:'")

    header, comma, data = data_url[len(_PREFIX) :].partition(",")
    if not comma:
        raise ParseError(data_url, "Missing comma sign")

    content_type, is_base64_encoded, parameters = _parse_header(header)

    return DataUrl(
        content=ascii_bytes(data, errors="replace"),
        content_type=content_type,
        is_base64_encoded=is_base64_encoded,
        parameters=tuple(parameters),
    )


def try_parse(data_url: Optional[str]) -> Optional[DataUrl]:
    try:
        return parse(data_url)
    except Exception as e:
        logger.debug(f"Not a data URL: {e}")
        return None
