"""Launching screen controller: the single owner of LaunchingScreenState.

Intents arrive through handle_intent(); each handler produces a new
immutable state snapshot that is pushed to subscribers. Asynchronous work
(countdown ticks, email re-validation, submissions, link opening) runs as
tasks on the same event loop, so state is never mutated in parallel.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Coroutine
from dataclasses import replace
from typing import Any

from comingsoon.application.dtos.early_access import (
    EarlyAccessRequest,
    EarlyAccessResponse,
)
from comingsoon.application.dtos.launching import (
    ClearError,
    CloseSuccessDialog,
    InitializeCountdown,
    LaunchingEffect,
    LaunchingIntent,
    LaunchingScreenState,
    OpenLink,
    SubmitEarlyAccessRequest,
    UpdateAgreeToTerms,
    UpdateCountdown,
    UpdateField,
)
from comingsoon.application.interfaces.services import IClock, ILinkOpener
from comingsoon.application.services.countdown import CountdownTicker
from comingsoon.application.services.validators import (
    EmailValidator,
    FieldValidator,
    NameValidator,
)
from comingsoon.domain.enums import EffectKind, FormField
from comingsoon.domain.exceptions import ComingSoonException
from comingsoon.domain.value_objects import CivilTimestamp, RemainingDuration
from comingsoon.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

FORM_INVALID_MESSAGE = "Please fill all required fields correctly"
GENERIC_ERROR_MESSAGE = "An error occurred"

# Queue size per subscriber; a slow subscriber loses its oldest snapshots, never blocks the controller.
SUBSCRIBER_QUEUE_SIZE = 32

# Blank-check labels for fields validated synchronously on update.
_REQUIRED_FIELD_LABELS: dict[FormField, str] = {
    FormField.FULL_NAME: "Full name",
    FormField.INSTITUTION: "Institution",
    FormField.ROLE: "Role",
}

SubmitCallable = Callable[[EarlyAccessRequest], Awaitable[EarlyAccessResponse]]


def _offer(queue: asyncio.Queue[Any], item: Any) -> None:
    """put_nowait, dropping the oldest entry when the queue is full."""
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(item)


def _failure_message(error: Exception) -> str:
    if isinstance(error, ComingSoonException):
        return error.message or GENERIC_ERROR_MESSAGE
    return str(error) or GENERIC_ERROR_MESSAGE


class LaunchingController:
    """Interprets launching screen intents and owns the screen state.

    Collaborators are injected: submit (usually SubmitEarlyAccessUseCase),
    clock and link opener. Construct inside a running event loop when the
    countdown is to be started.
    """

    def __init__(
        self,
        submit: SubmitCallable,
        clock: IClock,
        link_opener: ILinkOpener,
        target: CivilTimestamp,
        *,
        countdown_interval_seconds: float = 1.0,
        guard_reentrant_submit: bool = True,
        strict_form_validity: bool = False,
    ) -> None:
        self._submit = submit
        self._link_opener = link_opener
        self._guard_reentrant_submit = guard_reentrant_submit
        self._strict_form_validity = strict_form_validity
        self._ticker = CountdownTicker(
            clock,
            target,
            self._apply_countdown,
            interval_seconds=countdown_interval_seconds,
        )
        self._state = LaunchingScreenState(countdown=self._ticker.compute())
        self._email_task: asyncio.Task[None] | None = None
        self._tasks: set[asyncio.Task[Any]] = set()
        self._subscribers: set[asyncio.Queue[LaunchingScreenState]] = set()
        self._effect_subscribers: set[asyncio.Queue[LaunchingEffect]] = set()
        self._handlers: dict[type, Callable[[Any], Awaitable[None]]] = {
            InitializeCountdown: self._initialize_countdown,
            UpdateCountdown: self._update_countdown,
            UpdateField: self._update_field,
            UpdateAgreeToTerms: self._update_agree_to_terms,
            SubmitEarlyAccessRequest: self._submit_early_access_request,
            ClearError: self._clear_error,
            CloseSuccessDialog: self._close_success_dialog,
            OpenLink: self._open_link,
        }

    # -- observation -----------------------------------------------------

    @property
    def state(self) -> LaunchingScreenState:
        return self._state

    @property
    def target(self) -> CivilTimestamp:
        return self._ticker.target

    @property
    def is_countdown_running(self) -> bool:
        return self._ticker.is_running

    def is_form_valid(self, state: LaunchingScreenState | None = None) -> bool:
        """Aggregate validity used by Submit.

        Default: LaunchingScreenState.is_form_valid. Strict mode also needs
        institution/role errors clear and the full name to pass NameValidator.
        """
        if state is None:
            state = self._state
        if not state.is_form_valid:
            return False
        if not self._strict_form_validity:
            return True
        return (
            state.institution_error is None
            and state.role_error is None
            and NameValidator.validate(state.full_name).is_valid
        )

    def current_countdown(self) -> RemainingDuration:
        """Freshly recomputed remaining time (does not touch state)."""
        return self._ticker.compute()

    def subscribe(self) -> asyncio.Queue[LaunchingScreenState]:
        """Queue receiving every new state snapshot until unsubscribe()."""
        queue: asyncio.Queue[LaunchingScreenState] = asyncio.Queue(
            maxsize=SUBSCRIBER_QUEUE_SIZE
        )
        self._subscribers.add(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue[LaunchingScreenState]) -> None:
        self._subscribers.discard(queue)

    def subscribe_effects(self) -> asyncio.Queue[LaunchingEffect]:
        """Queue receiving one-shot effects (success, error, open link)."""
        queue: asyncio.Queue[LaunchingEffect] = asyncio.Queue(
            maxsize=SUBSCRIBER_QUEUE_SIZE
        )
        self._effect_subscribers.add(queue)
        return queue

    def unsubscribe_effects(self, queue: asyncio.Queue[LaunchingEffect]) -> None:
        self._effect_subscribers.discard(queue)

    # -- intents ---------------------------------------------------------

    async def handle_intent(self, intent: LaunchingIntent) -> LaunchingScreenState:
        """Apply an intent and return the resulting state.

        Work started by the intent (submission, link opening) may still be
        running when this returns; see wait_idle().

        Raises:
            TypeError: If intent is not a known intent type.
        """
        handler = self._handlers.get(type(intent))
        if handler is None:
            raise TypeError(f"Unsupported intent: {intent!r}")
        await handler(intent)
        return self._state

    async def wait_idle(self) -> None:
        """Wait for pending email validation, submissions and link openings."""
        pending = list(self._tasks)
        if self._email_task is not None:
            pending.append(self._email_task)
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    async def aclose(self) -> None:
        """Stop the countdown and cancel every pending task (controller teardown)."""
        await self._ticker.aclose()
        pending = list(self._tasks)
        if self._email_task is not None:
            pending.append(self._email_task)
            self._email_task = None
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self._tasks.clear()
        logger.info("Launching controller closed")

    # -- handlers --------------------------------------------------------

    async def _initialize_countdown(self, intent: InitializeCountdown) -> None:
        self._ticker.start()

    async def _update_countdown(self, intent: UpdateCountdown) -> None:
        self._apply_countdown(self._ticker.compute())

    async def _update_field(self, intent: UpdateField) -> None:
        form_field = intent.field
        value = intent.value
        if form_field is FormField.EMAIL:
            self._set_state(replace(self._state, email=value))
            self._schedule_email_validation(value)
            return
        changes: dict[str, Any] = {form_field.value: value}
        label = _REQUIRED_FIELD_LABELS.get(form_field)
        if label is not None:
            result = FieldValidator.validate(value, label)
            changes[f"{form_field.value}_error"] = result.error_message
        self._set_state(replace(self._state, **changes))

    async def _update_agree_to_terms(self, intent: UpdateAgreeToTerms) -> None:
        self._set_state(replace(self._state, agree_to_terms=intent.agree))

    async def _submit_early_access_request(
        self, intent: SubmitEarlyAccessRequest
    ) -> None:
        if self._submission_in_flight():
            return
        # Let a pending email check land so validity reflects the latest email.
        if self._email_task is not None and not self._email_task.done():
            await asyncio.gather(self._email_task, return_exceptions=True)
            # Another Submit may have started while this one waited.
            if self._submission_in_flight():
                return

        state = self._state
        if not self.is_form_valid(state):
            self._set_state(replace(state, error_message=FORM_INVALID_MESSAGE))
            return

        request = EarlyAccessRequest(
            full_name=state.full_name,
            email=state.email,
            institution=state.institution,
            role=state.role,
            referral_code=state.referral_code if state.referral_code.strip() else None,
            agree_to_terms=state.agree_to_terms,
        )
        self._set_state(replace(state, is_submitting=True))
        self._spawn(self._run_submission(request), name="early-access-submit")

    def _submission_in_flight(self) -> bool:
        if self._guard_reentrant_submit and self._state.is_submitting:
            logger.warning("Submit ignored: a submission is already in flight")
            return True
        return False

    async def _clear_error(self, intent: ClearError) -> None:
        self._set_state(replace(self._state, error_message=None))

    async def _close_success_dialog(self, intent: CloseSuccessDialog) -> None:
        self._set_state(replace(self._state, show_success_dialog=False))

    async def _open_link(self, intent: OpenLink) -> None:
        self._emit(LaunchingEffect(EffectKind.OPEN_LINK, url=intent.url))
        self._spawn(self._run_open_link(intent.url), name="open-link")

    # -- background work -------------------------------------------------

    async def _run_submission(self, request: EarlyAccessRequest) -> None:
        try:
            response = await self._submit(request)
        except Exception as e:
            logger.warning("Early access submission failed: %s", e)
            self._fail_submission(_failure_message(e))
            return
        if not response.success:
            self._fail_submission(response.message or GENERIC_ERROR_MESSAGE)
            return
        self._set_state(
            replace(
                self._state,
                is_submitting=False,
                show_success_dialog=True,
                success_message=response.message,
                access_code=response.access_code,
            )
        )
        self._emit(LaunchingEffect(EffectKind.SHOW_SUCCESS, message=response.message))

    def _fail_submission(self, message: str) -> None:
        self._set_state(replace(self._state, is_submitting=False, error_message=message))
        self._emit(LaunchingEffect(EffectKind.SHOW_ERROR, message=message))

    async def _run_open_link(self, url: str) -> None:
        try:
            await self._link_opener.open(url)
        except Exception:
            logger.exception("Failed to open link %s", url)

    def _schedule_email_validation(self, email: str) -> None:
        if self._email_task is not None and not self._email_task.done():
            self._email_task.cancel()
        self._email_task = asyncio.create_task(
            self._validate_email(email), name="validate-email"
        )

    async def _validate_email(self, email: str) -> None:
        result = EmailValidator.validate(email)
        if self._state.email != email:
            return
        self._set_state(replace(self._state, email_error=result.error_message))

    # -- plumbing --------------------------------------------------------

    def _apply_countdown(self, duration: RemainingDuration) -> None:
        if duration != self._state.countdown:
            self._set_state(replace(self._state, countdown=duration))

    def _spawn(self, coro: Coroutine[Any, Any, None], name: str) -> None:
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _set_state(self, state: LaunchingScreenState) -> None:
        self._state = state
        for queue in list(self._subscribers):
            _offer(queue, state)

    def _emit(self, effect: LaunchingEffect) -> None:
        for queue in list(self._effect_subscribers):
            _offer(queue, effect)
