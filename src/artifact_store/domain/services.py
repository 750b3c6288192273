"""
Domain Services

Logic that does not belong to a single value object.
"""

from typing import Optional, Union

from artifact_store.domain.value_objects import Credential
from artifact_store.shared.errors.domain import StoreError, UnprovidedAuthorizationError

BEARER_PREFIX = "Bearer "


def _is_visible_ascii(value: str) -> bool:
    return all(c == "\t" or " " <= c <= "~" for c in value)


def extract_token(header: Optional[Union[str, bytes]]) -> Credential:
    """
    Parse a bearer credential out of an Authorization header value.

    Args:
        header: Raw header value, or None when the header is absent

    Returns:
        Credential holding everything after the "Bearer " prefix

    Raises:
        UnprovidedAuthorizationError: header is absent
        StoreError: header is not visible ASCII, or uses another scheme
    """
    if header is None:
        raise UnprovidedAuthorizationError()

    if isinstance(header, bytes):
        try:
            header = header.decode("ascii")
        except UnicodeDecodeError:
            raise StoreError("bad header encoding")

    if not _is_visible_ascii(header):
        raise StoreError("bad header encoding")

    if not header.startswith(BEARER_PREFIX):
        raise StoreError("unknown authentication method")

    return Credential(token=header[len(BEARER_PREFIX):])
