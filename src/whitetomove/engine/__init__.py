"""Opponent-engine package: request session and Qt worker bridge."""

from whitetomove.engine.qt_bridge import EngineWorker
from whitetomove.engine.search import CancelCheck, IEngine, SearchLimits
from whitetomove.engine.session import EngineBusyError, EngineSession, EngineState

__all__ = [
    "CancelCheck",
    "EngineBusyError",
    "EngineSession",
    "EngineState",
    "EngineWorker",
    "IEngine",
    "SearchLimits",
]
