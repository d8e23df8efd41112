from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, model_validator


MAX_STARTING_BALANCE = Decimal(10**12)


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: Any | None = None


class CreateSessionRequest(BaseModel):
    player_name: str | None = Field(
        default=None,
        max_length=40,
        description="Name entered on the welcome screen",
        examples=["alice"],
    )
    starting_balance: Decimal | None = Field(default=None, ge=0, le=MAX_STARTING_BALANCE, examples=[1000])
    synthetic_players: int | None = Field(default=None, ge=0, le=20, examples=[4])


class WagerInputsRequest(BaseModel):
    """Raw widget values; numbers are clamped, text is ignored, empty unsets."""

    stake: float | str | None = Field(default=None, examples=[50])
    cash_out_multiplier: float | str | None = Field(default=None, examples=[2.5])

    @model_validator(mode="after")
    def validate_not_empty(self) -> "WagerInputsRequest":
        if not self.model_fields_set:
            raise ValueError("at least one of stake or cash_out_multiplier is required")
        return self


class StartRoundRequest(BaseModel):
    stake: Decimal | None = Field(default=None, examples=[50])
    cash_out_multiplier: Decimal | None = Field(default=None, examples=[2])


class StopRoundRequest(BaseModel):
    stop_point: Decimal = Field(..., description="Multiplier at which the round halted", examples=[3.1])


class SpeedRequest(BaseModel):
    speed: Decimal = Field(..., examples=[1.5])


class ParticipantResponse(BaseModel):
    id: int
    name: str
    is_human: bool
    stake: Decimal | None = None
    cash_out_multiplier: Decimal | None = None
    score: int | None = None


class SessionResponse(BaseModel):
    session_id: int
    player_name: str
    balance: Decimal
    phase: str
    stop_point: Decimal | None = None
    speed: Decimal
    round_number: int
    human_stake: Decimal | None = None
    human_cash_out_multiplier: Decimal | None = None
    stake_bounds: tuple[Decimal, Decimal]
    multiplier_bounds: tuple[Decimal, Decimal]
    participants: list[ParticipantResponse]


class SettlementResponse(BaseModel):
    session_id: int
    stop_point: Decimal
    human_payout: int
    total_staked: Decimal
    total_paid: int
    house_delta: Decimal
    balance: Decimal
    participants: list[ParticipantResponse]

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "session_id": 1,
                    "stop_point": 3.0,
                    "human_payout": 100,
                    "total_staked": 250,
                    "total_paid": 100,
                    "house_delta": 150,
                    "balance": 1050,
                    "participants": [],
                }
            ]
        }
    }


class CurrentRoundRowResponse(BaseModel):
    id: int
    name: str
    stake: str
    cash_out_multiplier: str
    outcome: str | None = None


class RankingRowResponse(BaseModel):
    rank: int
    name: str
    score: str
