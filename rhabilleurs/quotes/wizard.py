"""
Quote request wizard as an explicit state machine.

Every state is its own frozen dataclass carrying the draft, so a state that
cannot exist (say, "submitted but still on step 2") cannot be built. Events are
plain functions taking a state and returning the next one; they never touch
the session or the network themselves, except ``submit`` which delegates the
single outbound request to the gateway it is given.

    Step1 --advance--> Step2 --advance--> Step3 --submit--> Submitting
      ^                  |  ^               |                 |     |
      +------back--------+  +-----back------+        accepted |     | rejected
                                    ^                         v     v
                                    +---------retry----- SubmissionFailed
                                                         Submitted (terminal)
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, fields, replace
from typing import Callable, ClassVar, Dict, Mapping, Optional, Tuple, Type

from .forms import DEFAULT_WATCH_TYPE, STEP_FIELDS, STEP_FORMS
from .gateway import GatewayError

logger = logging.getLogger(__name__)


class InvalidTransition(Exception):
    """Raised when an event is not allowed in the current state."""

    def __init__(self, state: 'WizardState', event: str) -> None:
        self.state = state
        self.event = event
        super().__init__(f"Event {event!r} is not allowed in state {state.name!r}")


@dataclass(frozen=True)
class QuoteDraft:
    """Values entered so far, plus the field errors of the last validation."""

    name: str = ''
    email: str = ''
    phone: str = ''
    brand: str = ''
    model: str = ''
    watch_type: str = DEFAULT_WATCH_TYPE
    problem_description: str = ''
    photo_link: str = ''
    errors: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def value_fields(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if f.name != 'errors')

    def values(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in self.value_fields()}

    def step_data(self, step: int) -> Dict[str, str]:
        return {name: getattr(self, name) for name in STEP_FIELDS[step]}

    def with_input(self, data: Optional[Mapping], step: int) -> 'QuoteDraft':
        """
        Copy with the fields of ``step`` taken from ``data`` (e.g. ``request.POST``).

        Fields of other steps are never overwritten, so a crafted POST cannot
        change already validated values.
        """
        if not data:
            return self
        updates = {}
        for name in STEP_FIELDS[step]:
            if name in data:
                value = data.get(name)
                updates[name] = '' if value is None else str(value)
        return replace(self, **updates) if updates else self

    def has_errors(self) -> bool:
        return bool(self.errors)


@dataclass(frozen=True)
class WizardState:
    draft: QuoteDraft = field(default_factory=QuoteDraft)

    name: ClassVar[str] = ''
    step: ClassVar[Optional[int]] = None
    terminal: ClassVar[bool] = False


@dataclass(frozen=True)
class Step1(WizardState):
    name: ClassVar[str] = 'step1'
    step: ClassVar[Optional[int]] = 1


@dataclass(frozen=True)
class Step2(WizardState):
    name: ClassVar[str] = 'step2'
    step: ClassVar[Optional[int]] = 2


@dataclass(frozen=True)
class Step3(WizardState):
    name: ClassVar[str] = 'step3'
    step: ClassVar[Optional[int]] = 3


@dataclass(frozen=True)
class Submitting(WizardState):
    started_at: float = 0.0

    name: ClassVar[str] = 'submitting'


@dataclass(frozen=True)
class Submitted(WizardState):
    name: ClassVar[str] = 'submitted'
    terminal: ClassVar[bool] = True


@dataclass(frozen=True)
class SubmissionFailed(WizardState):
    reason: str = ''

    name: ClassVar[str] = 'submission_failed'


STEPS: Dict[int, Type[WizardState]] = {1: Step1, 2: Step2, 3: Step3}

STATES: Dict[str, Type[WizardState]] = {
    cls.name: cls for cls in (Step1, Step2, Step3, Submitting, Submitted, SubmissionFailed)
}


def start() -> Step1:
    return Step1(QuoteDraft())


def validate_step(step: int, draft: QuoteDraft) -> Tuple[QuoteDraft, bool]:
    """
    Validate the fields of one step only.

    Returns the draft with cleaned (trimmed) values and fresh errors for that
    step, and whether the step is valid. Errors of other steps are dropped.
    """
    form = STEP_FORMS[step](data=draft.step_data(step))
    if form.is_valid():
        cleaned = {name: form.cleaned_data.get(name) or '' for name in STEP_FIELDS[step]}
        return replace(draft, errors={}, **cleaned), True
    errors = {name: tuple(messages) for name, messages in form.errors.items()}
    return replace(draft, errors=errors), False


def advance(state: WizardState, data: Optional[Mapping] = None) -> WizardState:
    """
    Move forward from step 1 or 2.

    On invalid input the state stays on the same step with errors populated.
    """
    if state.step not in (1, 2):
        raise InvalidTransition(state, 'advance')
    draft = state.draft.with_input(data, state.step)
    draft, ok = validate_step(state.step, draft)
    if not ok:
        return replace(state, draft=draft)
    return STEPS[state.step + 1](draft)


def back(state: WizardState, data: Optional[Mapping] = None) -> WizardState:
    """Go back one step, keeping every value (no validation)."""
    if state.step not in (2, 3):
        raise InvalidTransition(state, 'back')
    draft = replace(state.draft.with_input(data, state.step), errors={})
    return STEPS[state.step - 1](draft)


def begin_submission(state: WizardState, data: Optional[Mapping] = None) -> WizardState:
    """
    Validate step 3 and enter ``Submitting``.

    Returns ``Step3`` with errors when the description is not valid.
    """
    if not isinstance(state, Step3):
        raise InvalidTransition(state, 'submit')
    draft = state.draft.with_input(data, 3)
    draft, ok = validate_step(3, draft)
    if not ok:
        return Step3(draft)
    return Submitting(draft, started_at=time.time())


def resolve(state: WizardState, accepted: bool, reason: str = '') -> WizardState:
    """Outcome of the gateway call for a ``Submitting`` state."""
    if not isinstance(state, Submitting):
        raise InvalidTransition(state, 'resolve')
    if accepted:
        return Submitted(state.draft)
    return SubmissionFailed(state.draft, reason=reason)


def retry(state: WizardState) -> WizardState:
    """Return to step 3 after a failed submission, values unchanged."""
    if not isinstance(state, SubmissionFailed):
        raise InvalidTransition(state, 'retry')
    return Step3(state.draft)


def submit(
    state: WizardState,
    gateway,
    data: Optional[Mapping] = None,
    on_submitting: Optional[Callable[[Submitting], None]] = None,
) -> WizardState:
    """
    Full submission: validate step 3, call the gateway once, resolve.

    ``on_submitting`` is invoked with the ``Submitting`` state before the
    request goes out (the view uses it to persist the in-flight state so a
    second click is refused). Gateway failures never propagate: they become
    ``SubmissionFailed``.
    """
    submitting = begin_submission(state, data)
    if not isinstance(submitting, Submitting):
        return submitting
    if on_submitting is not None:
        on_submitting(submitting)

    try:
        gateway.send(submitting.draft)
    except GatewayError as exc:
        logger.warning("Quote submission failed: %s", exc)
        return resolve(submitting, accepted=False, reason=str(exc))
    return resolve(submitting, accepted=True)
