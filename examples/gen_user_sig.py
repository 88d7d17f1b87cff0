"""Example: generate a UserSig and inspect what it carries.

Replace the values below with your own, then run:

    python gen_user_sig.py
"""

import logging
from datetime import timedelta

from tls_usersig import SignerConfig, decode_user_sig, generate_token

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
log = logging.getLogger(__name__)

# ===== Fill in your own values =====
SDK_APP_ID = 0
SECRET_KEY = "5bd2850fff3ecb11d7c805251c51ee463a25727bddc2385f3fa8bfee1bb93b5e"
# ===================================

IDENTIFIER = "10086"
USERBUF = b"This' really a good crate!"


def main() -> None:
    config = SignerConfig(sdk_app_id=SDK_APP_ID, secret_key=SECRET_KEY)

    user_sig = generate_token(config, IDENTIFIER, timedelta(hours=2), USERBUF)
    log.info("UserSig: %s", user_sig)

    envelope = decode_user_sig(user_sig)
    log.info(
        "identifier=%s sdkappid=%d time=%d expire=%d",
        envelope["TLS.identifier"],
        envelope["TLS.sdkappid"],
        envelope["TLS.time"],
        envelope["TLS.expire"],
    )


if __name__ == "__main__":
    main()
