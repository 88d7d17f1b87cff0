"""Error codes and error types for TLS UserSig generation."""

# Error codes
ERR_INVALID_PARAM = 2001
ERR_ENCODE_FAILED = 2002
ERR_DECODE_FAILED = 2003


class UserSigError(Exception):
    """Error raised while issuing or decoding a UserSig."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"tls-usersig error [{code}]: {message}")
