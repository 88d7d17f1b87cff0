"""URL-safe base64 variant used by the UserSig wire format.

Standard base64 output with three characters substituted::

    +  ->  *
    /  ->  -
    =  ->  _

Padding is kept and substituted like any other character.
"""

import base64
import binascii

from tls_usersig.errors import UserSigError, ERR_DECODE_FAILED

_ENCODE_TABLE = str.maketrans("+/=", "*-_")
_DECODE_TABLE = str.maketrans("*-_", "+/=")


def encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").translate(_ENCODE_TABLE)


def decode(text: str) -> bytes:
    """Reverse :func:`encode`. Raises ``UserSigError`` on malformed input."""
    if any(c in text for c in "+/="):
        raise UserSigError(ERR_DECODE_FAILED, "standard base64 characters in url-safe text")
    try:
        return base64.b64decode(text.translate(_DECODE_TABLE), validate=True)
    except (binascii.Error, ValueError) as e:
        raise UserSigError(ERR_DECODE_FAILED, "invalid url-safe base64: {}".format(e))
