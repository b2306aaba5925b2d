"""Identity Store — fixed, configured username/password pairs for the Basic gate.

Invariants:
    - Unknown usernames and wrong passwords both verify as False
    - Password comparison is constant-time
"""

import hmac
from typing import Mapping


class StaticCredentialVerifier:
    """CredentialVerifier backed by an in-memory username → password mapping."""

    def __init__(self, users: Mapping[str, str]):
        self._users = dict(users)

    def verify(self, username: str, password: str) -> bool:
        expected = self._users.get(username)
        if expected is None:
            return False
        return hmac.compare_digest(password.encode(), expected.encode())
