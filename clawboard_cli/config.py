"""
clawboard-cli shared configuration, constants, and module-level state.
Also owns the two JSON documents kept in the config directory.
"""

import json
import os
import tempfile

from clawboard_cli.exceptions import CliError, SetupError
from clawboard_cli.models import BoardConfig, Credentials

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

CONFIG_DIR = os.environ.get("CLAWBOARD_CONFIG_DIR") or os.path.join(
    os.path.expanduser("~"), ".config", "trello"
)

ENV_PATH = os.path.join(CONFIG_DIR, "clawboard.env")
CREDENTIALS_PATH = os.path.join(CONFIG_DIR, "credentials.json")
BOARD_PATH = os.path.join(CONFIG_DIR, "board.json")

# Keys that load_env() picks up from os.environ when the env file lacks them.
_KNOWN_ENV_KEYS = (
    "CLAWBOARD_NAME",
    "CLAWBOARD_HTTP_TIMEOUT_SECONDS",
    "CLAWBOARD_HTTP_MAX_RESPONSE_BYTES",
    "CLAWBOARD_HTTP_LOG",
    "CLAWBOARD_MCP_RESPONSE_MODE",
)


def load_env():
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key in _KNOWN_ENV_KEYS:
        if key not in env and os.environ.get(key):
            env[key] = os.environ[key]
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# JSON documents (credentials.json, board.json)
# ---------------------------------------------------------------------------


def _read_json(path):
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise SetupError(
            f"[SETUP_NEEDED] Invalid JSON in {path}: {e.msg} at position {e.pos}"
        ) from None
    except OSError as e:
        raise SetupError(f"[SETUP_NEEDED] Could not read {path}: {e.strerror}") from None


def _write_json(path, data, private=False):
    """Write *data* as pretty JSON (atomic write-then-rename)."""
    target_dir = os.path.dirname(path) or "."
    try:
        os.makedirs(target_dir, exist_ok=True)
    except OSError as e:
        raise CliError(f"[ERROR] Could not create {target_dir}: {e.strerror}") from None
    try:
        fd, tmp_path = tempfile.mkstemp(dir=target_dir, prefix=".clawboard_tmp_")
    except OSError as e:
        raise CliError(f"[ERROR] Could not write {path}: {e.strerror}") from None
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(json.dumps(data, indent=2) + "\n")
        os.replace(tmp_path, path)
    except Exception as e:
        try:
            os.remove(tmp_path)
        except OSError:
            pass
        if isinstance(e, OSError):
            raise CliError(f"[ERROR] Could not write {path}: {e.strerror}") from None
        raise
    if private:
        # Owner-only on Unix/Mac. Failure is an accepted risk and is not reported.
        try:
            os.chmod(path, 0o600)
        except (OSError, NotImplementedError):
            pass
    return path


def load_credentials():
    """Return stored Credentials. Raises SetupError if missing or malformed."""
    path = CREDENTIALS_PATH
    if not os.path.exists(path):
        raise SetupError(
            f"[SETUP_NEEDED] Missing Trello credentials: {path}\n"
            "  Run: clawboard init --key <key> --token <token>"
        )
    return Credentials.from_dict(_read_json(path), path)


def save_credentials(creds):
    return _write_json(CREDENTIALS_PATH, creds.to_dict(), private=True)


def load_board_config():
    """Return the stored BoardConfig, or None when no board was provisioned yet."""
    path = BOARD_PATH
    if not os.path.exists(path):
        return None
    return BoardConfig.from_dict(_read_json(path), path)


def save_board_config(board):
    return _write_json(BOARD_PATH, board.to_dict())


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.1.0"
CONTRACT_SCHEMA_VERSION = "1.0"

API_BASE = "https://api.trello.com/1"

DEFAULT_BOARD_NAME = "Clawboard"

# (key, remote list name) in creation order.
BOARD_LISTS = (("todo", "To do"), ("doing", "Doing"), ("done", "Done"))

LIST_LIMIT_DEFAULT = 20
LIST_LIMIT_MIN = 1
LIST_LIMIT_MAX = 200

# Due dates are pinned to 09:00 at UTC+9, independent of the local timezone.
DUE_TIME_SUFFIX = "T09:00:00+09:00"

# ---------------------------------------------------------------------------
# Module-level state (loaded from clawboard.env / os.environ)
# ---------------------------------------------------------------------------

env = load_env()

BOARD_NAME = env.get("CLAWBOARD_NAME", "").strip()
HTTP_TIMEOUT_SECONDS = _env_int("CLAWBOARD_HTTP_TIMEOUT_SECONDS", 30)
HTTP_MAX_RESPONSE_BYTES = _env_int("CLAWBOARD_HTTP_MAX_RESPONSE_BYTES", 5_000_000)
HTTP_LOG_ENABLED = _env_bool("CLAWBOARD_HTTP_LOG", False)
MCP_RESPONSE_MODE = env.get("CLAWBOARD_MCP_RESPONSE_MODE", "legacy").strip().lower()
if MCP_RESPONSE_MODE not in ("legacy", "envelope"):
    MCP_RESPONSE_MODE = "legacy"

RUNTIME_VERBOSE = False
