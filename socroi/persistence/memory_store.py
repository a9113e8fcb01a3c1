from __future__ import annotations

from typing import Any, Optional

from pydantic import ValidationError

from .base import InputStore, StoredState, StoredStateError


class MemoryStore(InputStore):
    """In-process store. Holds the raw payload, as a key-value store would."""

    def __init__(self, payload: Optional[dict[str, Any]] = None):
        self.payload = payload

    def load(self) -> Optional[StoredState]:
        if self.payload is None:
            return None
        try:
            return StoredState.model_validate(self.payload)
        except ValidationError as e:
            raise StoredStateError(f"Invalid stored state: {e}") from e

    def save(self, state: StoredState) -> None:
        self.payload = state.model_dump(mode="json")
