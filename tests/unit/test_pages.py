"""Tests for the server-rendered coming-soon page."""

from comingsoon.application.dtos.launching import LaunchingScreenState
from comingsoon.domain.value_objects import RemainingDuration
from comingsoon.pages import render_launching_page


def test_page_is_seeded_with_state() -> None:
    state = LaunchingScreenState(
        countdown=RemainingDuration(days=12, hours=3, minutes=4, seconds=5),
        full_name="Ada",
        error_message="Please fill all required fields correctly",
    )
    html = render_launching_page("IAIAIN", state, ["https://linkedin.com"])
    assert '<span id="cd-days" class="num">12</span>' in html
    assert '<span id="cd-seconds" class="num">05</span>' in html
    assert 'value="Ada"' in html
    assert "Please fill all required fields correctly" in html
    assert 'data-link="https://linkedin.com"' in html


def test_user_values_are_escaped() -> None:
    state = LaunchingScreenState(full_name='"><script>alert(1)</script>')
    html = render_launching_page("IAIAIN", state)
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


def test_success_dialog_visibility() -> None:
    hidden = render_launching_page("IAIAIN", LaunchingScreenState())
    shown = render_launching_page(
        "IAIAIN",
        LaunchingScreenState(show_success_dialog=True, access_code="IAIAIN-424242"),
    )
    assert '<div class="dialog" id="success-dialog" hidden>' in hidden
    assert '<div class="dialog" id="success-dialog" >' in shown
    assert "IAIAIN-424242" in shown
