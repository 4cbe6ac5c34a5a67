from __future__ import annotations

import base64
import os

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

_SCHEME = "scrypt"
_SALT_BYTES = 16
_KEY_LENGTH = 32
_N = 2**14
_R = 8
_P = 1


class PasswordHashError(ValueError):
    pass


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _b64decode(value: str) -> bytes:
    return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))


def hash_password(password: str) -> str:
    salt = os.urandom(_SALT_BYTES)
    kdf = Scrypt(salt=salt, length=_KEY_LENGTH, n=_N, r=_R, p=_P)
    derived = kdf.derive(password.encode("utf-8"))
    return f"{_SCHEME}${_N}${_R}${_P}${_b64encode(salt)}${_b64encode(derived)}"


def _parse(encoded: str) -> tuple[int, int, int, bytes, bytes]:
    try:
        scheme, n, r, p, salt, derived = encoded.split("$")
        if scheme != _SCHEME:
            raise ValueError(scheme)
        return int(n), int(r), int(p), _b64decode(salt), _b64decode(derived)
    except ValueError as exc:
        raise PasswordHashError("Unsupported password hash format") from exc


def verify_password(password: str, encoded: str) -> bool:
    n, r, p, salt, derived = _parse(encoded)
    kdf = Scrypt(salt=salt, length=len(derived), n=n, r=r, p=p)
    try:
        kdf.verify(password.encode("utf-8"), derived)
    except InvalidKey:
        return False
    return True
