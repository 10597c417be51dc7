import logging
import threading
from typing import Any, Dict, Optional

from .challenges import ChallengeGenerator
from .registry import ConnectionRegistry
from .broadcast import BroadcastChannel
from .scheduler import ResetScheduler
from .exceptions import ConfigurationError

IDLE = 'idle'
ACTIVE = 'active'
RESOLVED = 'resolved'

DEFAULT_RESET_DELAY_MS = 5000


class Round:
    """State of the single process-wide round. Only the coordinator writes it."""

    def __init__(self):
        self.state = IDLE
        self.challenge_text: Optional[str] = None
        self.winner_name: Optional[str] = None
        self.pending_reset: Optional[int] = None


class SessionCoordinator:
    """Runs the shared typing race: idle -> active -> resolved -> active ...

    Every transition, the reset callback included, runs under one lock
    that also covers its emits. The winner check-and-set in `submit`
    therefore happens in a single step, and "first" means first to take
    the lock.
    """

    def __init__(
        self,
        generator: ChallengeGenerator,
        registry: ConnectionRegistry,
        channel: BroadcastChannel,
        scheduler: ResetScheduler,
        reset_delay_ms: int = DEFAULT_RESET_DELAY_MS,
        logger=None,
    ):
        try:
            reset_delay_ms = int(reset_delay_ms)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Reset delay must be an integer, got {reset_delay_ms!r}")
        if reset_delay_ms <= 0:
            raise ConfigurationError(f"Reset delay must be positive, got {reset_delay_ms}")
        self._generator = generator
        self._registry = registry
        self._channel = channel
        self._scheduler = scheduler
        self._reset_delay_ms = reset_delay_ms
        self._logger = logger or logging.getLogger(__name__)
        self._round = Round()
        self._lock = threading.RLock()
        self._closed = False

    @property
    def reset_delay_ms(self) -> int:
        return self._reset_delay_ms

    @property
    def state(self) -> str:
        return self._round.state

    @property
    def challenges(self):
        return self._generator.corpus

    def join(self, connection_id: str, name: Optional[str]) -> None:
        with self._lock:
            self._registry.register(connection_id, name)
            self._logger.info(f"[join] sid={connection_id} name={name!r} state={self._round.state}")
            if self._round.state == IDLE:
                self._start_round()
            else:
                self._channel.emit_one(connection_id, 'start', self._round.challenge_text)

    def submit(self, connection_id: str, text: Any) -> bool:
        """Handle a typed submission. Returns True only for the winning one."""
        with self._lock:
            rnd = self._round
            if rnd.state != ACTIVE:
                self._logger.debug(f"[typed-ignored] sid={connection_id} state={rnd.state}")
                return False
            if not isinstance(text, str) or text != rnd.challenge_text:
                self._logger.debug(f"[typed-ignored] sid={connection_id} mismatch")
                return False

            rnd.winner_name = self._registry.name_of(connection_id)
            rnd.state = RESOLVED
            self._logger.info(f"[winner] sid={connection_id} name={rnd.winner_name!r}")
            self._channel.emit_all('winner', rnd.winner_name)
            rnd.pending_reset = self._scheduler.schedule(self._reset_delay_ms, self._on_reset)
            return True

    def disconnect(self, connection_id: str) -> None:
        with self._lock:
            if connection_id not in self._registry:
                self._logger.debug(f"[disconnect-unknown] sid={connection_id}")
            self._registry.remove(connection_id)

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            rnd = self._round
            return {
                'state': rnd.state,
                'challenge': rnd.challenge_text,
                'winner': rnd.winner_name,
                'reset_pending': rnd.pending_reset is not None,
                'participants': len(self._registry),
                'reset_delay_ms': self._reset_delay_ms,
            }

    def shutdown(self) -> None:
        """Cancel a pending reset so no timer outlives the server."""
        with self._lock:
            self._closed = True
            self._scheduler.cancel()
            self._round.pending_reset = None

    def _on_reset(self) -> None:
        with self._lock:
            if self._closed:
                self._logger.info("[timer-abort] coordinator shut down")
                return
            self._round.pending_reset = None
            self._start_round()

    def _start_round(self) -> None:
        rnd = self._round
        rnd.challenge_text = self._generator.next()
        rnd.winner_name = None
        rnd.state = ACTIVE
        self._logger.info(f"[round-start] text={rnd.challenge_text!r}")
        self._channel.emit_all('start', rnd.challenge_text)
