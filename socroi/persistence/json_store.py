"""File-backed store keeping calculator state as a JSON document."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .base import InputStore, StoredState, StoredStateError

logger = logging.getLogger(__name__)


class JsonFileStore(InputStore):
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> Optional[StoredState]:
        if not self.path.exists():
            return None
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return StoredState.model_validate(raw)
        except (OSError, ValueError, ValidationError) as e:
            raise StoredStateError(f"Could not read stored state from {self.path}: {e}") from e

    def save(self, state: StoredState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(state.model_dump(mode="json"), indent=2)
        self.path.write_text(payload, encoding="utf-8")
        logger.debug("Saved calculator state to %s", self.path)
