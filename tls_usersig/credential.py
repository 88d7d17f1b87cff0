"""Signer configuration for UserSig generation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from tls_usersig.errors import UserSigError, ERR_INVALID_PARAM

MAX_SDK_APP_ID = 2**64 - 1


@dataclass(frozen=True)
class SignerConfig:
    """Holds the issuing identity for UserSig generation.

    Two values are needed:
        - sdk_app_id: application ID from the console, an unsigned 64-bit integer
        - secret_key: the application's secret key, used as the HMAC key

    The config is read-only and can be shared between threads. Several
    configs may coexist in one process.

    Example::

        config = SignerConfig(
            sdk_app_id=1400000000,
            secret_key="your-sdk-secret-key",
        )
    """

    sdk_app_id: int
    secret_key: Union[str, bytes]

    def __post_init__(self) -> None:
        # bool is an int subclass but never a valid application id
        if not isinstance(self.sdk_app_id, int) or isinstance(self.sdk_app_id, bool):
            raise UserSigError(ERR_INVALID_PARAM, "sdk_app_id must be an integer")
        if not 0 <= self.sdk_app_id <= MAX_SDK_APP_ID:
            raise UserSigError(
                ERR_INVALID_PARAM,
                "sdk_app_id {} out of unsigned 64-bit range".format(self.sdk_app_id),
            )
        if not isinstance(self.secret_key, (str, bytes)):
            raise UserSigError(ERR_INVALID_PARAM, "secret_key must be str or bytes")

    @property
    def key_bytes(self) -> bytes:
        if isinstance(self.secret_key, bytes):
            return self.secret_key
        return self.secret_key.encode("utf-8")

    def with_key(self, secret_key: Union[str, bytes]) -> SignerConfig:
        """Return a copy of this config using a new secret key (e.g. after a leak)."""
        return replace(self, secret_key=secret_key)

    def __repr__(self) -> str:
        return "SignerConfig(sdk_app_id={}, secret_key=***)".format(self.sdk_app_id)
