"""
Credential bootstrap for clawboard-cli (`clawboard init`).
"""

import sys

from clawboard_cli import config
from clawboard_cli.api import _mask_token, check_credentials
from clawboard_cli.exceptions import SetupError
from clawboard_cli.models import Credentials

AUTH_GUIDE = """\
Trello credentials are required.

  1. Get your API key:   https://trello.com/power-ups/admin  (API key tab)
  2. Generate a token:   https://trello.com/1/authorize?expiration=never&scope=read,write&response_type=token&key=<YOUR_KEY>
  3. Run:                clawboard init --key <key> --token <token>
"""


def print_auth_guide():
    print(AUTH_GUIDE, file=sys.stderr)


def maybe_load_credentials():
    """Stored credentials, or None if they are missing or unreadable."""
    try:
        return config.load_credentials()
    except SetupError:
        return None


def verify_credentials(key=None, token=None):
    """Validate a key/token pair against the API without storing it.

    Returns (creds, status) where status is the check_credentials() result."""
    key = (key or "").strip()
    token = (token or "").strip()
    if not key or not token:
        print_auth_guide()
        raise SetupError(
            f"[SETUP_NEEDED] Missing --key/--token. Expected credentials at "
            f"{config.CREDENTIALS_PATH}"
        )
    creds = Credentials(key=key, token=token)
    status = check_credentials(creds)
    if not status["ok"]:
        raise SetupError(
            f"[SETUP_NEEDED] Provided Trello credentials are invalid "
            f"(key {_mask_token(key)}): {status['error']}"
        )
    return creds, status
