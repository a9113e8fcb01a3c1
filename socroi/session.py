"""CalculatorSession -- owns the current inputs and keeps results in step.

The session is the single holder of the input record. Every edit derives a
new record, recomputes results and breakdown, swaps all three in at once,
persists the base fields and then notifies listeners.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from socroi.assumptions.loader import get_default_assumptions, load_assumptions
from socroi.assumptions.schema import AssumptionsConfig
from socroi.config.settings import Settings
from socroi.engine.derivation import calculate_computed_fields, derive_fields
from socroi.engine.metrics import compute_results
from socroi.engine.result import ResultRecord, ValueBreakdown
from socroi.engine.value import compute_value_breakdown
from socroi.events import SessionEvent, SessionEventType
from socroi.models.enums import InputField, ViewMode
from socroi.models.inputs import DEFAULT_INPUTS, DERIVED_FIELDS, InputRecord, resolve_field
from socroi.persistence.base import InputStore, StoredState, StoredStateError
from socroi.persistence.json_store import JsonFileStore
from socroi.persistence.memory_store import MemoryStore

logger = logging.getLogger(__name__)

Listener = Callable[[SessionEvent], None]

# Derived fields that nothing else depends on; editing one is an override.
_OVERRIDE_FIELDS = frozenset(DERIVED_FIELDS) - {InputField.SECURITY_INCIDENTS_PER_MONTH}


@dataclass(frozen=True)
class _Snapshot:
    inputs: InputRecord
    results: ResultRecord
    breakdown: ValueBreakdown


class CalculatorSession:
    def __init__(
        self,
        store: Optional[InputStore] = None,
        assumptions: Optional[AssumptionsConfig] = None,
    ) -> None:
        self._store = store if store is not None else MemoryStore()
        self._assumptions = assumptions or get_default_assumptions()
        self._listeners: list[Listener] = []
        self._sequence = 0
        self._view_mode = ViewMode.DARK

        inputs, restored = self._restore()
        self._snapshot = self._compute(inputs)
        if restored:
            self._emit(SessionEventType.STATE_RESTORED, {"view_mode": self._view_mode.value})

    @property
    def inputs(self) -> InputRecord:
        return self._snapshot.inputs

    @property
    def results(self) -> ResultRecord:
        return self._snapshot.results

    @property
    def breakdown(self) -> ValueBreakdown:
        return self._snapshot.breakdown

    @property
    def view_mode(self) -> ViewMode:
        return self._view_mode

    @property
    def assumptions(self) -> AssumptionsConfig:
        return self._assumptions

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def update(self, field: Union[InputField, str], value: Any) -> ResultRecord:
        """Apply one edit, recompute everything and persist the base fields."""
        resolved = resolve_field(field)
        inputs = derive_fields(self.inputs, resolved, value, self._assumptions)
        self._snapshot = self._compute(inputs)
        self._save()

        self._emit(
            SessionEventType.FIELD_CHANGED, {"field": resolved.value, "value": value}
        )
        if resolved in _OVERRIDE_FIELDS:
            # Holds until the next employee or incident edit re-derives it
            self._emit(
                SessionEventType.OVERRIDE_APPLIED, {"field": resolved.value, "value": value}
            )
        self._emit_recalculated()
        return self.results

    def reset(self) -> ResultRecord:
        """Return every input to its default value."""
        self._snapshot = self._compute(DEFAULT_INPUTS)
        self._save()
        logger.info("Calculator inputs reset to defaults")
        self._emit(SessionEventType.STATE_RESET, {})
        self._emit_recalculated()
        return self.results

    def set_view_mode(self, mode: Union[ViewMode, str]) -> None:
        self._view_mode = ViewMode(mode)
        self._save()
        self._emit(SessionEventType.VIEW_MODE_CHANGED, {"view_mode": self._view_mode.value})

    def _compute(self, inputs: InputRecord) -> _Snapshot:
        results = compute_results(inputs, self._assumptions)
        breakdown = compute_value_breakdown(inputs, results, self._assumptions)
        return _Snapshot(inputs=inputs, results=results, breakdown=breakdown)

    def _restore(self) -> tuple[InputRecord, bool]:
        """Load stored base fields and regenerate the derived ones."""
        try:
            state = self._store.load()
        except StoredStateError as e:
            logger.warning("Ignoring unreadable stored state, using defaults: %s", e)
            return DEFAULT_INPUTS, False

        if state is None:
            return DEFAULT_INPUTS, False

        self._view_mode = state.view_mode
        inputs = calculate_computed_fields(state.to_record(), self._assumptions)
        logger.info("Restored calculator state (%d stored fields)", len(state.inputs))
        return inputs, True

    def _save(self) -> None:
        self._store.save(StoredState.from_record(self.inputs, self._view_mode))

    def _emit_recalculated(self) -> None:
        results = self.results
        self._emit(
            SessionEventType.RECALCULATED,
            {
                "annual_savings": results.annual_savings,
                "roi_percentage": results.roi_percentage,
                "total_value": self.breakdown.total_value,
            },
        )

    def _emit(self, event_type: SessionEventType, data: dict[str, Any]) -> None:
        self._sequence += 1
        event = SessionEvent(event_type=event_type, data=data, sequence_id=self._sequence)
        logger.debug("Session event %s #%d", event_type.value, self._sequence)
        for listener in list(self._listeners):
            listener(event)


def create_session(settings: Optional[Settings] = None) -> CalculatorSession:
    """Build a session persisting to the configured state file."""
    settings = settings or Settings()
    assumptions = load_assumptions(settings.assumptions_file)
    return CalculatorSession(
        store=JsonFileStore(settings.state_file), assumptions=assumptions
    )
