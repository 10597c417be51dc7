import random
from typing import Iterable, List, Optional

from .exceptions import ConfigurationError


def load_corpus(path: str) -> List[str]:
    """Read challenges from a text file, one per non-blank line."""
    try:
        with open(path, encoding='utf-8') as fh:
            lines = [line.rstrip('\r\n') for line in fh]
    except OSError as exc:
        raise ConfigurationError(f"Cannot read challenge corpus {path}: {exc}") from exc
    return [line for line in lines if line.strip()]


class ChallengeGenerator:
    """Picks challenge text uniformly at random from a fixed corpus."""

    def __init__(self, corpus: Iterable[str], rng: Optional[random.Random] = None):
        self._corpus = [str(text) for text in (corpus or [])]
        if not self._corpus:
            raise ConfigurationError('Challenge corpus must not be empty')
        self._rng = rng or random.Random()

    @property
    def corpus(self) -> List[str]:
        return list(self._corpus)

    def __len__(self) -> int:
        return len(self._corpus)

    def next(self) -> str:
        return self._rng.choice(self._corpus)
