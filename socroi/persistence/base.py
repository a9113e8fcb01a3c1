from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from socroi.engine.derivation import base_fields
from socroi.models.enums import ViewMode
from socroi.models.inputs import BASE_FIELDS, InputRecord, field_alias


class StoredStateError(Exception):
    """Raised when persisted calculator state cannot be read or validated."""


class StoredState(BaseModel):
    """What survives between sessions: base inputs and the view mode.

    Derived fields are never stored; they are recomputed on restore.
    """

    inputs: dict[str, Any] = Field(default_factory=dict)
    view_mode: ViewMode = ViewMode.DARK

    @field_validator("inputs")
    @classmethod
    def inputs_must_be_base_fields(cls, v: dict[str, Any]) -> dict[str, Any]:
        allowed = {field_alias(f) for f in BASE_FIELDS}
        unknown = sorted(set(v) - allowed)
        if unknown:
            raise ValueError(f"Not storable input fields: {unknown}")
        # Type-check values against the record schema
        InputRecord.model_validate(v)
        return v

    @classmethod
    def from_record(cls, record: InputRecord, view_mode: ViewMode) -> StoredState:
        return cls(inputs=base_fields(record), view_mode=view_mode)

    def to_record(self) -> InputRecord:
        """Base inputs as a record; derived fields still hold defaults."""
        return InputRecord.model_validate(self.inputs)


class InputStore(ABC):
    """Abstract load/save port for calculator state."""

    @abstractmethod
    def load(self) -> Optional[StoredState]:
        """Return the stored state, or None if nothing has been saved.

        Raises StoredStateError if stored data exists but is unusable.
        """
        ...

    @abstractmethod
    def save(self, state: StoredState) -> None:
        """Persist ``state``, replacing whatever was stored before."""
        ...
