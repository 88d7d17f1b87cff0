"""Example: generate a UserSig with configuration from the environment.

Set the following environment variables (or put them in a .env file):

    export TLS_SDK_APP_ID="1400000000"
    export TLS_SECRET_KEY="your-sdk-secret-key"

Then run:

    python gen_user_sig_env.py
"""

import logging
import os
import sys

from dotenv import load_dotenv

from tls_usersig import SignerConfig, UserSigError, generate_token

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(message)s",
)
log = logging.getLogger(__name__)

ENV_SDK_APP_ID = "TLS_SDK_APP_ID"
ENV_SECRET_KEY = "TLS_SECRET_KEY"
ENV_IDENTIFIER = "TLS_IDENTIFIER"
ENV_EXPIRE = "TLS_EXPIRE"


def main() -> None:
    load_dotenv()

    sdk_app_id_str = os.environ.get(ENV_SDK_APP_ID, "")
    secret_key = os.environ.get(ENV_SECRET_KEY, "")

    if not sdk_app_id_str or not secret_key:
        print(
            f"Error: Missing required environment variables.\n\n"
            f"Please set the following environment variables:\n\n"
            f'  export {ENV_SDK_APP_ID}="your-sdk-app-id"\n'
            f'  export {ENV_SECRET_KEY}="your-sdk-secret-key"\n\n'
            f"Optional:\n\n"
            f'  export {ENV_IDENTIFIER}="administrator"\n'
            f'  export {ENV_EXPIRE}="36000"\n',
            file=sys.stderr,
        )
        sys.exit(1)

    try:
        sdk_app_id = int(sdk_app_id_str)
    except ValueError:
        print(f"Invalid {ENV_SDK_APP_ID}: {sdk_app_id_str} (must be integer)", file=sys.stderr)
        sys.exit(1)

    expire_str = os.environ.get(ENV_EXPIRE, "36000")
    try:
        expire = int(expire_str)
    except ValueError:
        print(f"Invalid {ENV_EXPIRE}: {expire_str} (must be integer)", file=sys.stderr)
        sys.exit(1)

    identifier = os.environ.get(ENV_IDENTIFIER, "administrator")

    try:
        config = SignerConfig(sdk_app_id=sdk_app_id, secret_key=secret_key)
        user_sig = generate_token(config, identifier, expire)
    except UserSigError as exc:
        log.error("Generate UserSig failed: %s", exc)
        sys.exit(1)

    log.info("UserSig for %s (valid %ds): %s", identifier, expire, user_sig)


if __name__ == "__main__":
    main()
