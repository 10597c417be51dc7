"""Race domain services: challenge selection, participants, timers and
the round coordinator.

Nothing in this package imports Flask. Socket handlers and the app factory
wire these pieces to the transport, keeping the round rules testable
without a server.
"""

from .challenges import ChallengeGenerator, load_corpus
from .registry import ConnectionRegistry
from .broadcast import BroadcastChannel
from .scheduler import ResetScheduler
from .coordinator import SessionCoordinator
from .exceptions import RaceError, ConfigurationError, ResetAlreadyPending

__all__ = [
    'ChallengeGenerator',
    'load_corpus',
    'ConnectionRegistry',
    'BroadcastChannel',
    'ResetScheduler',
    'SessionCoordinator',
    'RaceError',
    'ConfigurationError',
    'ResetAlreadyPending',
]
