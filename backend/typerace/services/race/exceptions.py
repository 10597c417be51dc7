"""Exceptions raised by the race services."""


class RaceError(Exception):
    """Base class for race service errors."""
    pass


class ConfigurationError(RaceError):
    """Startup configuration is unusable (empty corpus, bad delay)."""
    pass


class ResetAlreadyPending(RaceError):
    """A reset was requested while another one is still armed."""
    def __init__(self, handle):
        self.handle = handle
        super().__init__(f"Reset {handle} is already pending")
