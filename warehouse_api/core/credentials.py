"""Basic Credentials — pure parsing of the HTTP "Basic" Authorization header.

Invariants:
    - PURE: no IO, never consults the identity store
    - Returns None for anything that is not a well-formed Basic credential pair
    - Only the first ':' separates username from password

Design Decisions:
    - Return None (not exceptions): the gate treats every malformed shape the
      same way, so callers need no except-ladder
"""

import base64
import binascii
from dataclasses import dataclass

BASIC_SCHEME = "basic"


@dataclass(frozen=True)
class BasicCredentials:
    """Decoded username/password pair."""
    username: str
    password: str

    def __repr__(self) -> str:
        return f"BasicCredentials(username={self.username!r}, password='***')"


def parse_basic_authorization(header: str | None) -> BasicCredentials | None:
    """Decode `Basic base64(username:password)`, or None if malformed."""
    if not header:
        return None
    scheme, _, token = header.strip().partition(" ")
    if scheme.lower() != BASIC_SCHEME:
        return None
    token = token.strip()
    if not token:
        return None
    try:
        decoded = base64.b64decode(token, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    username, separator, password = decoded.partition(":")
    if not separator:
        return None
    return BasicCredentials(username=username, password=password)
