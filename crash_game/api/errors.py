from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from crash_game.domain import (
    CrashGameError,
    InsufficientBalanceError,
    InvalidPhaseError,
    InvalidSpeedError,
    InvalidStopPointError,
    InvalidWagerError,
)
from crash_game.service import SessionNotFound


def api_error(
    *,
    code: str,
    message: str,
    details: Any | None = None,
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={
            "code": code,
            "message": message,
            "details": details,
        },
    )


# most specific classes first
_ERROR_CODES: tuple[tuple[type[CrashGameError], str, int], ...] = (
    (SessionNotFound, "session_not_found", status.HTTP_404_NOT_FOUND),
    (InsufficientBalanceError, "insufficient_balance", status.HTTP_400_BAD_REQUEST),
    (InvalidWagerError, "invalid_wager", status.HTTP_400_BAD_REQUEST),
    (InvalidPhaseError, "invalid_phase", status.HTTP_409_CONFLICT),
    (InvalidStopPointError, "invalid_stop_point", status.HTTP_400_BAD_REQUEST),
    (InvalidSpeedError, "invalid_speed", status.HTTP_400_BAD_REQUEST),
)


def domain_error(exc: CrashGameError, *, details: Any | None = None) -> HTTPException:
    for error_type, code, status_code in _ERROR_CODES:
        if isinstance(exc, error_type):
            return api_error(code=code, message=str(exc), details=details, status_code=status_code)
    return api_error(code="game_rule_violation", message=str(exc), details=details)
