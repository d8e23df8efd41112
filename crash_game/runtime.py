from __future__ import annotations

from crash_game.config import load_settings
from crash_game.service import CrashGameService
from crash_game.services.board_service import BoardService

settings = load_settings()
service = CrashGameService(settings)
board = BoardService()
