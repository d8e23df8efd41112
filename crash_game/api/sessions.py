from __future__ import annotations

from fastapi import APIRouter, status

from crash_game.api.errors import domain_error
from crash_game.api.schemas import (
    CreateSessionRequest,
    CurrentRoundRowResponse,
    ParticipantResponse,
    RankingRowResponse,
    SessionResponse,
    SettlementResponse,
    SpeedRequest,
    StartRoundRequest,
    StopRoundRequest,
    WagerInputsRequest,
)
from crash_game.domain import CrashGameError, Participant
from crash_game.runtime import board, service
from crash_game.service import SessionHandle

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _participant(participant: Participant) -> ParticipantResponse:
    return ParticipantResponse(
        id=participant.id,
        name=participant.name,
        is_human=participant.is_human,
        stake=participant.stake,
        cash_out_multiplier=participant.cash_out_multiplier,
        score=participant.score,
    )


def _session_response(handle: SessionHandle) -> SessionResponse:
    session = handle.session
    stake_low, stake_high = session.stake_bounds()
    multiplier_low, multiplier_high = session.multiplier_bounds()
    return SessionResponse(
        session_id=handle.session_id,
        player_name=session.player_name,
        balance=session.balance,
        phase=session.round.phase.value,
        stop_point=session.round.stop_point,
        speed=session.round.speed,
        round_number=session.round.number,
        human_stake=session.human_stake,
        human_cash_out_multiplier=session.human_cash_out_multiplier,
        stake_bounds=(stake_low, stake_high),
        multiplier_bounds=(multiplier_low, multiplier_high),
        participants=[_participant(p) for p in session.participants],
    )


@router.post(
    "",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new game session",
)
def create_session(payload: CreateSessionRequest) -> SessionResponse:
    try:
        handle = service.create_session(
            player_name=payload.player_name,
            starting_balance=payload.starting_balance,
            synthetic_players=payload.synthetic_players,
        )
    except CrashGameError as exc:
        raise domain_error(exc) from exc
    return _session_response(handle)


@router.get("/{session_id}", response_model=SessionResponse, summary="Get session state")
def get_session(session_id: int) -> SessionResponse:
    try:
        handle = service.get(session_id)
    except CrashGameError as exc:
        raise domain_error(exc, details={"session_id": session_id}) from exc
    return _session_response(handle)


@router.put("/{session_id}/inputs", response_model=SessionResponse, summary="Update wager inputs")
def update_inputs(session_id: int, payload: WagerInputsRequest) -> SessionResponse:
    try:
        handle = service.update_inputs(session_id, payload.model_dump(exclude_unset=True))
    except CrashGameError as exc:
        raise domain_error(exc, details={"session_id": session_id}) from exc
    return _session_response(handle)


@router.put("/{session_id}/speed", response_model=SessionResponse, summary="Change multiplier speed")
def set_speed(session_id: int, payload: SpeedRequest) -> SessionResponse:
    try:
        handle = service.set_speed(session_id, payload.speed)
    except CrashGameError as exc:
        raise domain_error(exc, details={"session_id": session_id}) from exc
    return _session_response(handle)


@router.post("/{session_id}/round/start", response_model=SessionResponse, summary="Start a round")
def start_round(session_id: int, payload: StartRoundRequest | None = None) -> SessionResponse:
    payload = payload or StartRoundRequest()
    try:
        handle = service.start_round(
            session_id,
            stake=payload.stake,
            cash_out_multiplier=payload.cash_out_multiplier,
        )
    except CrashGameError as exc:
        raise domain_error(exc, details={"session_id": session_id}) from exc
    return _session_response(handle)


@router.post("/{session_id}/round/stop", response_model=SettlementResponse, summary="Stop and settle a round")
def stop_round(session_id: int, payload: StopRoundRequest) -> SettlementResponse:
    try:
        result = service.stop_round(session_id, payload.stop_point)
        session = service.get(session_id).session
    except CrashGameError as exc:
        raise domain_error(exc, details={"session_id": session_id}) from exc
    return SettlementResponse(
        session_id=session_id,
        stop_point=result.stop_point,
        human_payout=result.human_payout,
        total_staked=result.total_staked,
        total_paid=result.total_paid,
        house_delta=result.house_delta,
        balance=session.balance,
        participants=[_participant(p) for p in result.participants],
    )


@router.post("/{session_id}/round/reset", response_model=SessionResponse, summary="Reset the round")
def reset_round(session_id: int) -> SessionResponse:
    try:
        handle = service.reset_round(session_id)
    except CrashGameError as exc:
        raise domain_error(exc, details={"session_id": session_id}) from exc
    return _session_response(handle)


@router.get(
    "/{session_id}/board/current",
    response_model=list[CurrentRoundRowResponse],
    summary="Current round table",
)
def current_round_board(session_id: int) -> list[CurrentRoundRowResponse]:
    try:
        session = service.get(session_id).session
    except CrashGameError as exc:
        raise domain_error(exc, details={"session_id": session_id}) from exc
    rows = board.current_round(session.participants, session.round.phase, session.round.stop_point)
    return [CurrentRoundRowResponse(**vars(row)) for row in rows]


@router.get(
    "/{session_id}/board/ranking",
    response_model=list[RankingRowResponse],
    summary="Ranking table",
)
def ranking_board(session_id: int) -> list[RankingRowResponse]:
    try:
        session = service.get(session_id).session
    except CrashGameError as exc:
        raise domain_error(exc, details={"session_id": session_id}) from exc
    return [RankingRowResponse(**vars(row)) for row in board.ranking(session.participants, session.round.phase)]
