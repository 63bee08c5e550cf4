"""clawboard-cli: CLI tool for a todo/doing/done kanban on Trello."""

from clawboard_cli.client import ClawboardClient
from clawboard_cli.config import VERSION
from clawboard_cli.exceptions import (
    ApiError,
    AuthError,
    CliError,
    ResolutionError,
    SetupError,
    ValidationError,
)
from clawboard_cli.models import BoardConfig, Credentials
from clawboard_cli.types import (
    BoardConfigDict,
    CardListResult,
    CardRecord,
    InitResult,
    StatusResult,
)

__all__ = [
    "VERSION",
    "ApiError",
    "AuthError",
    "BoardConfig",
    "BoardConfigDict",
    "CardListResult",
    "CardRecord",
    "ClawboardClient",
    "CliError",
    "Credentials",
    "InitResult",
    "ResolutionError",
    "SetupError",
    "StatusResult",
    "ValidationError",
]
