"""
Submission state machine shared by the authentication flows.

A flow owns one form. ``submit()`` either rejects (marking every field
touched so errors become visible), or builds the flow's request payload,
hands it to the auth backend and completes.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel

from authflow.core.exceptions import FlowClosedError
from authflow.core.flow_context import FlowContext, new_flow_context
from authflow.forms.model import FormModel
from authflow.forms.validators import FieldRaw
from authflow.services.auth_backend import AuthBackend, DevAuthBackend

log = logging.getLogger("authflow")


class FlowState(str, Enum):
    IDLE = "idle"
    INVALID = "invalid"
    SUBMITTING = "submitting"
    COMPLETED = "completed"
    TOKEN_MISSING = "token_missing"


class FlowController:
    name = "flow"

    def __init__(self, backend: AuthBackend | None = None):
        self.backend: AuthBackend = backend or DevAuthBackend()
        self.context: FlowContext = new_flow_context(self.name)
        self.form: FormModel = self.build_form()
        self.last_request: BaseModel | None = None
        self._closed = False
        self._state = self.initial_state()

    # --- hooks for concrete flows ---

    def build_form(self) -> FormModel:
        raise NotImplementedError

    def build_request(self, values: dict[str, Any]) -> BaseModel:
        raise NotImplementedError

    def dispatch(self, request: BaseModel) -> None:
        raise NotImplementedError

    def initial_state(self) -> FlowState:
        return FlowState.IDLE

    def on_completed(self) -> None:
        pass

    # --- public API ---

    @property
    def state(self) -> FlowState:
        # edits may arrive straight through self.form; a rejected attempt ends once valid
        if self._state is FlowState.INVALID and self.form.is_valid():
            self._transition(FlowState.IDLE)
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    def set_value(self, name: str, value: FieldRaw) -> None:
        self._ensure_open()
        self.form.set_value(name, value)

    def submit(self) -> BaseModel | None:
        """Try to submit. Returns the request handed to the backend, or None."""
        self._ensure_open()

        if self._state in (FlowState.TOKEN_MISSING, FlowState.COMPLETED):
            log.info("flow_submit_blocked", extra=self.context.log_extra(state=self._state.value))
            return None

        if not self.form.is_valid():
            self.form.mark_all_touched()
            log.info("flow_submit_rejected", extra=self.context.log_extra(errors=self.form.errors()))
            self._transition(FlowState.INVALID)
            return None

        request = self.build_request(self.form.snapshot())
        self._transition(FlowState.SUBMITTING)
        try:
            self.dispatch(request)
            self.on_completed()
        except Exception:
            log.exception("flow_dispatch_failed", extra=self.context.log_extra())
            self._transition(FlowState.IDLE)
            raise

        self.last_request = request
        self._transition(FlowState.COMPLETED)
        log.info("flow_submitted", extra=self.context.log_extra())
        return request

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        log.info("flow_closed", extra=self.context.log_extra(state=self._state.value))

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- internals ---

    def _ensure_open(self) -> None:
        if self._closed:
            raise FlowClosedError(f"{self.name} flow {self.context.flow_id} is closed")

    def _transition(self, to: FlowState) -> None:
        if to is self._state:
            return
        log.debug(
            "flow_state_changed",
            extra=self.context.log_extra(from_state=self._state.value, to_state=to.value),
        )
        self._state = to
