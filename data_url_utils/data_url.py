import binascii
from typing import Iterable, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from data_url_utils.errors import DecodeError
from data_url_utils.utils.codec import (
    ascii_bytes,
    ascii_text,
    decode_base64,
    encode_base64,
    percent_encode,
    resolve_encoding,
)
from data_url_utils.utils.log_config import logger
from data_url_utils.utils.text import truncate_string

Parameter = Tuple[str, str]
Parameters = Union[Mapping[str, str], Iterable[Parameter]]


def _to_parameters(parameters: Optional[Parameters]) -> Tuple[Parameter, ...]:
    if parameters is None:
        return ()
    if isinstance(parameters, Mapping):
        return tuple(parameters.items())
    return tuple((key, value) for key, value in parameters)


class DataUrl(BaseModel):
    """
    Content embedded in a data URL.
    See https://www.rfc-editor.org/rfc/rfc2397 for reference.

    `content` is stored the way it appears in the URL:
    when `is_base64_encoded` is set it holds the ASCII bytes of the base64 text,
    otherwise it holds the literal content bytes.

    Every factory method stores the content base64 encoded.
    Only a parsed data URL without the `base64` flag is stored as is.
    """

    model_config = ConfigDict(frozen=True)

    content: bytes
    content_type: str
    is_base64_encoded: bool
    parameters: Tuple[Parameter, ...] = ()

    @classmethod
    def from_string(
        cls,
        content: str,
        content_type: str,
        parameters: Optional[Parameters] = None,
        encoding: Optional[str] = None,
    ) -> "DataUrl":
        data = content.encode(resolve_encoding(encoding))
        return cls.from_bytes(data, content_type, parameters)

    @classmethod
    def from_bytes(
        cls,
        content: bytes,
        content_type: str,
        parameters: Optional[Parameters] = None,
    ) -> "DataUrl":
        return cls(
            content=ascii_bytes(encode_base64(content)),
            content_type=content_type,
            is_base64_encoded=True,
            parameters=_to_parameters(parameters),
        )

    @classmethod
    def from_base64(
        cls,
        base64_content: str,
        content_type: str,
        parameters: Optional[Parameters] = None,
    ) -> "DataUrl":
        """
        The content isn't validated here.
        Invalid base64 text is reported by the read methods.
        """
        return cls(
            content=ascii_bytes(base64_content, errors="replace"),
            content_type=content_type,
            is_base64_encoded=True,
            parameters=_to_parameters(parameters),
        )

    @classmethod
    def from_data_url(cls, data_url: str) -> "DataUrl":
        from data_url_utils.parser import parse

        return parse(data_url)

    def read_as_bytes(self) -> bytes:
        if not self.is_base64_encoded:
            return self.content

        try:
            return decode_base64(self.content)
        except binascii.Error as e:
            logger.debug(f"Invalid base64 content: {e}")
            raise DecodeError(
                f"The content of the data URL ({self.content_type}) "
                "is not valid base64",
                self.content_type,
            ) from e

    def read_as_string(self, encoding: Optional[str] = None) -> str:
        encoding = resolve_encoding(encoding)
        data = self.read_as_bytes()
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            raise DecodeError(
                f"The content can't be decoded as {encoding}: {e.reason}",
                self.content_type,
            ) from e

    def read_as_base64_encoded_string(self) -> str:
        if self.is_base64_encoded:
            return ascii_text(self.content)
        return encode_base64(self.content)

    def get_parameter(
        self, key: str, default: Optional[str] = None
    ) -> Optional[str]:
        for name, value in self.parameters:
            if name == key:
                return value
        return default

    @property
    def charset(self) -> Optional[str]:
        for name, value in self.parameters:
            if name.lower() == "charset":
                return value
        return None

    def to_data_url(self) -> str:
        parts = ["data:", self.content_type]
        if self.is_base64_encoded:
            parts.append(";base64")

        for key, value in self.parameters:
            parts.append(f";{percent_encode(key)}={percent_encode(value)}")

        parts.append(",")
        parts.append(ascii_text(self.content))

        return "".join(parts)

    def __str__(self) -> str:
        return self.to_data_url()

    def __repr__(self) -> str:
        return f"DataUrl({truncate_string(self.to_data_url(), n=100)!r})"
