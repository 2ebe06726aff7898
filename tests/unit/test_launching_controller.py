"""Tests for LaunchingController: intents, submission lifecycle, effects and countdown."""

import asyncio

import pytest

from comingsoon.application.dtos.early_access import EarlyAccessResponse
from comingsoon.application.dtos.launching import (
    ClearError,
    CloseSuccessDialog,
    InitializeCountdown,
    OpenLink,
    SubmitEarlyAccessRequest,
    UpdateAgreeToTerms,
    UpdateCountdown,
    UpdateField,
)
from comingsoon.application.use_cases import LaunchingController, SubmitEarlyAccessUseCase
from comingsoon.application.use_cases.launching import FORM_INVALID_MESSAGE
from comingsoon.domain.enums import EffectKind, FormField
from comingsoon.domain.value_objects import RemainingDuration
from conftest import LAUNCH, FakeClock, FakeEarlyAccessClient, RecordingLinkOpener


def make_controller(
    client: FakeEarlyAccessClient,
    clock: FakeClock,
    link_opener: RecordingLinkOpener | None = None,
    **options,
) -> LaunchingController:
    return LaunchingController(
        submit=SubmitEarlyAccessUseCase(client),
        clock=clock,
        link_opener=link_opener or RecordingLinkOpener(),
        target=LAUNCH,
        **options,
    )


async def fill_form(controller: LaunchingController, *, agree: bool = True) -> None:
    for form_field, value in (
        (FormField.FULL_NAME, "Ada Lovelace"),
        (FormField.EMAIL, "ada@example.com"),
        (FormField.INSTITUTION, "Analytical Society"),
        (FormField.ROLE, "Student"),
    ):
        await controller.handle_intent(UpdateField(form_field, value))
    await controller.handle_intent(UpdateAgreeToTerms(agree))
    await controller.wait_idle()


@pytest.fixture
async def controller(fake_client, fake_clock, link_opener):
    controller = make_controller(fake_client, fake_clock, link_opener)
    yield controller
    await controller.aclose()


class TestFormUpdates:
    async def test_initial_state(self, controller: LaunchingController) -> None:
        state = controller.state
        assert state.countdown == RemainingDuration(1, 2, 3, 4)
        assert state.full_name == state.email == ""
        assert not state.is_submitting
        assert not controller.is_form_valid()

    async def test_blank_required_field_sets_error(self, controller) -> None:
        state = await controller.handle_intent(UpdateField(FormField.INSTITUTION, "  "))
        assert state.institution_error == "Institution is required"
        state = await controller.handle_intent(UpdateField(FormField.INSTITUTION, "IIT"))
        assert state.institution_error is None

    async def test_full_name_and_role_blank_checks(self, controller) -> None:
        await controller.handle_intent(UpdateField(FormField.FULL_NAME, ""))
        await controller.handle_intent(UpdateField(FormField.ROLE, ""))
        assert controller.state.full_name_error == "Full name is required"
        assert controller.state.role_error == "Role is required"

    async def test_referral_code_is_not_validated(self, controller) -> None:
        state = await controller.handle_intent(UpdateField(FormField.REFERRAL_CODE, ""))
        assert state.referral_code == ""

    async def test_email_is_validated_asynchronously(self, controller) -> None:
        state = await controller.handle_intent(UpdateField(FormField.EMAIL, "bad"))
        assert state.email == "bad"
        await controller.wait_idle()
        assert controller.state.email_error == "Invalid email format"

        await controller.handle_intent(UpdateField(FormField.EMAIL, "ada@example.com"))
        await controller.wait_idle()
        assert controller.state.email_error is None

    async def test_stale_email_result_is_discarded(self, controller) -> None:
        await controller.handle_intent(UpdateField(FormField.EMAIL, "bad"))
        await controller.handle_intent(UpdateField(FormField.EMAIL, "ada@example.com"))
        await controller.wait_idle()
        assert controller.state.email == "ada@example.com"
        assert controller.state.email_error is None

    async def test_unknown_intent_rejected(self, controller) -> None:
        with pytest.raises(TypeError, match="Unsupported intent"):
            await controller.handle_intent(object())


class TestSubmission:
    async def test_success_calls_client_once_and_shows_dialog(
        self, controller, fake_client
    ) -> None:
        effects = controller.subscribe_effects()
        await fill_form(controller)
        assert controller.is_form_valid()

        state = await controller.handle_intent(SubmitEarlyAccessRequest())
        assert state.is_submitting
        await controller.wait_idle()

        state = controller.state
        assert len(fake_client.requests) == 1
        assert fake_client.requests[0].referral_code is None
        assert not state.is_submitting
        assert state.show_success_dialog
        assert state.success_message == "Welcome aboard"
        assert state.access_code == "IAIAIN-123456"
        assert state.error_message is None
        effect = effects.get_nowait()
        assert effect.kind is EffectKind.SHOW_SUCCESS
        assert effect.message == "Welcome aboard"

    async def test_terms_not_agreed_never_calls_client(self, controller, fake_client) -> None:
        await fill_form(controller, agree=False)
        state = await controller.handle_intent(SubmitEarlyAccessRequest())
        await controller.wait_idle()
        assert fake_client.requests == []
        assert state.error_message == FORM_INVALID_MESSAGE
        assert not state.is_submitting

    async def test_invalid_email_blocks_submit(self, controller, fake_client) -> None:
        await fill_form(controller)
        await controller.handle_intent(UpdateField(FormField.EMAIL, "bad"))
        state = await controller.handle_intent(SubmitEarlyAccessRequest())
        assert state.email_error == "Invalid email format"
        assert state.error_message == FORM_INVALID_MESSAGE
        assert fake_client.requests == []

    async def test_referral_code_is_forwarded(self, controller, fake_client) -> None:
        await fill_form(controller)
        await controller.handle_intent(UpdateField(FormField.REFERRAL_CODE, "FRIEND42"))
        await controller.handle_intent(SubmitEarlyAccessRequest())
        await controller.wait_idle()
        assert fake_client.requests[0].referral_code == "FRIEND42"

    async def test_client_exception_becomes_error_message(self, fake_clock) -> None:
        client = FakeEarlyAccessClient(error=ConnectionError("endpoint down"))
        controller = make_controller(client, fake_clock)
        effects = controller.subscribe_effects()
        await fill_form(controller)
        await controller.handle_intent(SubmitEarlyAccessRequest())
        await controller.wait_idle()
        assert controller.state.error_message == "endpoint down"
        assert not controller.state.is_submitting
        assert not controller.state.show_success_dialog
        assert effects.get_nowait().kind is EffectKind.SHOW_ERROR
        await controller.aclose()

    async def test_rejected_response_becomes_error_message(self, fake_clock) -> None:
        client = FakeEarlyAccessClient(
            response=EarlyAccessResponse(success=False, message="Waitlist closed")
        )
        controller = make_controller(client, fake_clock)
        await fill_form(controller)
        await controller.handle_intent(SubmitEarlyAccessRequest())
        await controller.wait_idle()
        assert controller.state.error_message == "Waitlist closed"
        await controller.aclose()

    async def test_second_submit_while_pending_is_ignored(self, controller, fake_client) -> None:
        fake_client.release.clear()
        await fill_form(controller)
        await controller.handle_intent(SubmitEarlyAccessRequest())
        await asyncio.sleep(0)
        await controller.handle_intent(SubmitEarlyAccessRequest())
        fake_client.release.set()
        await controller.wait_idle()
        assert len(fake_client.requests) == 1

    async def test_submits_waiting_on_email_check_send_once(self, controller, fake_client) -> None:
        fake_client.release.clear()
        await fill_form(controller)
        await asyncio.gather(
            controller.handle_intent(UpdateField(FormField.EMAIL, "ada@example.org")),
            controller.handle_intent(SubmitEarlyAccessRequest()),
            controller.handle_intent(SubmitEarlyAccessRequest()),
        )
        fake_client.release.set()
        await controller.wait_idle()
        assert len(fake_client.requests) == 1
        assert fake_client.requests[0].email == "ada@example.org"

    async def test_unguarded_controller_submits_twice(self, fake_client, fake_clock) -> None:
        controller = make_controller(fake_client, fake_clock, guard_reentrant_submit=False)
        fake_client.release.clear()
        await fill_form(controller)
        await controller.handle_intent(SubmitEarlyAccessRequest())
        await controller.handle_intent(SubmitEarlyAccessRequest())
        fake_client.release.set()
        await controller.wait_idle()
        assert len(fake_client.requests) == 2
        await controller.aclose()

    async def test_strict_validity_uses_name_rules(self, fake_client, fake_clock) -> None:
        lenient = make_controller(fake_client, fake_clock)
        strict = make_controller(fake_client, fake_clock, strict_form_validity=True)
        for controller in (lenient, strict):
            await fill_form(controller)
            await controller.handle_intent(UpdateField(FormField.FULL_NAME, "A"))
        assert lenient.is_form_valid()
        assert not strict.is_form_valid()
        await lenient.aclose()
        await strict.aclose()


class TestDismissals:
    async def test_clear_error_keeps_form_values(self, controller) -> None:
        await fill_form(controller, agree=False)
        await controller.handle_intent(SubmitEarlyAccessRequest())
        state = await controller.handle_intent(ClearError())
        assert state.error_message is None
        assert state.full_name == "Ada Lovelace"
        assert state.email == "ada@example.com"

    async def test_close_success_dialog(self, controller) -> None:
        await fill_form(controller)
        await controller.handle_intent(SubmitEarlyAccessRequest())
        await controller.wait_idle()
        state = await controller.handle_intent(CloseSuccessDialog())
        assert not state.show_success_dialog
        assert state.access_code == "IAIAIN-123456"


class TestOpenLink:
    async def test_opens_and_emits_effect(self, controller, link_opener) -> None:
        effects = controller.subscribe_effects()
        before = controller.state
        await controller.handle_intent(OpenLink("https://linkedin.com"))
        await controller.wait_idle()
        assert link_opener.opened == ["https://linkedin.com"]
        effect = effects.get_nowait()
        assert effect.kind is EffectKind.OPEN_LINK
        assert effect.url == "https://linkedin.com"
        assert controller.state == before

    async def test_opener_failure_is_swallowed(self, fake_client, fake_clock) -> None:
        opener = RecordingLinkOpener(fail=True)
        controller = make_controller(fake_client, fake_clock, opener)
        await controller.handle_intent(OpenLink("https://example.com"))
        await controller.wait_idle()
        assert opener.opened == ["https://example.com"]
        assert controller.state.error_message is None
        await controller.aclose()


class TestCountdown:
    async def test_update_countdown_recomputes(self, controller, fake_clock) -> None:
        fake_clock.advance(4)
        state = await controller.handle_intent(UpdateCountdown())
        assert state.countdown == RemainingDuration(1, 2, 3, 0)

    async def test_initialize_starts_single_ticker(self, controller) -> None:
        await controller.handle_intent(InitializeCountdown())
        await controller.handle_intent(InitializeCountdown())
        assert controller.is_countdown_running
        await asyncio.sleep(0)
        running = [t for t in asyncio.all_tasks() if t.get_name() == "countdown-ticker"]
        assert sum(not t.cancelled() and not t.cancelling() for t in running) == 1

    async def test_subscribers_see_ticks(self, fake_client, wait_until) -> None:
        clock = FakeClock(LAUNCH)
        clock.advance(-2)
        controller = make_controller(fake_client, clock, countdown_interval_seconds=0.01)
        states = controller.subscribe()
        await controller.handle_intent(InitializeCountdown())
        clock.advance(2)
        await wait_until(lambda: not controller.is_countdown_running)
        assert controller.state.countdown == RemainingDuration.ZERO
        seen = []
        while not states.empty():
            seen.append(states.get_nowait().countdown)
        assert seen[-1] == RemainingDuration.ZERO
        await controller.aclose()

    async def test_aclose_stops_ticker(self, fake_client, fake_clock) -> None:
        controller = make_controller(fake_client, fake_clock)
        await controller.handle_intent(InitializeCountdown())
        await controller.aclose()
        assert not controller.is_countdown_running
