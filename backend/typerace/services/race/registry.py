from typing import Dict, Optional


class ConnectionRegistry:
    """Display names of participants, keyed by transport connection id.

    Names are stored as given: empty or duplicate names are allowed, and a
    second join from the same connection simply overwrites the first.
    """

    def __init__(self):
        self._names: Dict[str, Optional[str]] = {}

    def register(self, connection_id: str, name: Optional[str]) -> None:
        self._names[connection_id] = name

    def name_of(self, connection_id: str) -> Optional[str]:
        return self._names.get(connection_id)

    def remove(self, connection_id: str) -> None:
        self._names.pop(connection_id, None)

    def __contains__(self, connection_id) -> bool:
        return connection_id in self._names

    def __len__(self) -> int:
        return len(self._names)
