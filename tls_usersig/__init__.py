"""TLS UserSig (sig version 2.0) generation for Python."""

from tls_usersig.credential import SignerConfig
from tls_usersig.usersig import (
    DEFAULT_EXPIRE,
    SignRequest,
    Timestamps,
    decode_user_sig,
    gen_user_sig,
    generate_token,
    generate_token_with_time,
    verify_envelope,
)
from tls_usersig.errors import UserSigError

__all__ = [
    "SignerConfig",
    "SignRequest",
    "Timestamps",
    "DEFAULT_EXPIRE",
    "generate_token",
    "generate_token_with_time",
    "gen_user_sig",
    "decode_user_sig",
    "verify_envelope",
    "UserSigError",
]

__version__ = "0.1.0"
