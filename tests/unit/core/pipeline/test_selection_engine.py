from __future__ import annotations

"""
Unit tests for the Selection Orchestrator.

Runs the full selection flow against in-memory fakes and verifies:
1. Delivery to the clipboard and typing sinks.
2. Cancellation at each pick without side effects.
3. Classification of collaborator, entry and policy failures.
4. Path and field overrides.
"""

from fuzzel_pass.core.pipeline.engine import run_selection
from fuzzel_pass.domain.errors import (
    CollaboratorFailureError,
    CollaboratorInvocationError,
    ErrorKind,
)
from fuzzel_pass.domain.selection_models import SelectionOutcome


# -----------------------------------------------------------------------------
# Delivery Tests
# -----------------------------------------------------------------------------
def test_clipboard_delivery_happy_path(make_collaborators):
    collab, store, picker, clipboard, typer = make_collaborators(["Email/work.com", "username"])

    result = run_selection(collab)

    assert result.ok
    assert result.outcome is SelectionOutcome.DELIVERED
    assert result.password_id == "Email/work.com"
    assert result.field_key == "username"
    assert result.sink == "clipboard"
    assert clipboard.values == ["alice"]
    assert typer.values == []


def test_picker_receives_paths_then_distinct_field_keys(make_collaborators):
    collab, store, picker, clipboard, _ = make_collaborators(["Email/home.org", "password"])

    run_selection(collab)

    assert picker.calls[0] == ["Email/work.com", "Email/home.org", "Banking/cards/visa", "wifi"]
    assert picker.calls[1] == ["password", "username", "notes"]
    assert clipboard.values == ["hunter2"]


def test_multiline_field_goes_to_clipboard(make_collaborators):
    collab, _, _, clipboard, _ = make_collaborators(["Email/home.org", "notes"])

    result = run_selection(collab)

    assert result.ok
    assert result.multiline is True
    assert clipboard.values == ["line one\nline two"]


def test_type_mode_types_single_line_value(make_collaborators):
    collab, _, _, clipboard, typer = make_collaborators(["Email/work.com", "password"])

    result = run_selection(collab, type_mode=True)

    assert result.ok
    assert result.sink == "type"
    assert typer.values == ["secret123"]
    assert clipboard.values == []


def test_type_mode_refuses_multiline_before_typing(make_collaborators):
    collab, _, _, clipboard, typer = make_collaborators(["Email/home.org", "notes"])

    result = run_selection(collab, type_mode=True)

    assert not result.ok
    assert result.kind is ErrorKind.POLICY_VIOLATION
    assert result.field_key == "notes"
    assert typer.values == []
    assert clipboard.values == []


# -----------------------------------------------------------------------------
# Override Tests
# -----------------------------------------------------------------------------
def test_path_override_skips_listing(make_collaborators):
    collab, store, picker, clipboard, _ = make_collaborators(["url"])

    def fail_listing():
        raise AssertionError("listing must not be requested")

    collab.listing_provider = fail_listing

    result = run_selection(collab, path="Email/work.com")

    assert result.ok
    assert len(picker.calls) == 1
    assert clipboard.values == ["example.com"]


def test_field_override_skips_second_pick(make_collaborators):
    collab, _, picker, clipboard, _ = make_collaborators(["Banking/cards/visa"])

    result = run_selection(collab, field_key="pin")

    assert result.ok
    assert len(picker.calls) == 1
    assert clipboard.values == ["0000"]


def test_both_overrides_need_no_picker(make_collaborators):
    collab, _, picker, clipboard, _ = make_collaborators([])

    result = run_selection(collab, path="wifi", field_key="password")

    assert result.ok
    assert picker.calls == []
    assert clipboard.values == ["wpa-passphrase"]


def test_unknown_field_override_fails(make_collaborators):
    collab, _, _, clipboard, _ = make_collaborators([])

    result = run_selection(collab, path="wifi", field_key="username")

    assert not result.ok
    assert result.kind is ErrorKind.UNKNOWN_FIELD
    assert clipboard.values == []


# -----------------------------------------------------------------------------
# Cancellation Tests
# -----------------------------------------------------------------------------
def test_cancel_password_pick(make_collaborators):
    collab, store, _, clipboard, _ = make_collaborators([None])

    result = run_selection(collab)

    assert result.outcome is SelectionOutcome.CANCELLED
    assert result.kind is ErrorKind.CANCELLED
    assert store.shown == []
    assert clipboard.values == []


def test_cancel_field_pick(make_collaborators):
    collab, store, _, clipboard, _ = make_collaborators(["wifi", None])

    result = run_selection(collab)

    assert result.cancelled
    assert result.password_id == "wifi"
    assert store.shown == ["wifi"]
    assert clipboard.values == []


# -----------------------------------------------------------------------------
# Failure Tests
# -----------------------------------------------------------------------------
def test_listing_failure_is_reported(make_collaborators):
    collab, _, picker, _, _ = make_collaborators([])

    def broken_listing():
        raise CollaboratorFailureError("pass list", "Command exited with status 1.", "gpg: decryption failed")

    collab.listing_provider = broken_listing

    result = run_selection(collab)

    assert result.outcome is SelectionOutcome.FAILED
    assert result.kind is ErrorKind.TOOL_FAILURE
    assert "gpg: decryption failed" in result.error
    assert picker.calls == []


def test_picker_invocation_failure_is_reported(make_collaborators):
    collab, _, _, _, _ = make_collaborators([])

    def missing_picker(options):
        raise CollaboratorInvocationError("fuzzel --dmenu", "No such file or directory")

    collab.picker = missing_picker

    result = run_selection(collab)

    assert result.kind is ErrorKind.INVOCATION
    assert "fuzzel --dmenu" in result.error


def test_empty_store_is_reported(make_collaborators):
    collab, _, picker, _, _ = make_collaborators([])
    collab.listing_provider = lambda: "Password Store\n"

    result = run_selection(collab)

    assert result.kind is ErrorKind.NO_ENTRIES
    assert picker.calls == []


def test_malformed_entry_is_reported(make_collaborators):
    collab, store, picker, clipboard, _ = make_collaborators(["broken"])
    store.entries["broken"] = "s\nnotes:\n---\nnever closed\n"

    result = run_selection(collab, path="broken")

    assert result.kind is ErrorKind.MALFORMED_ENTRY
    assert "broken" in result.error
    assert "notes" in result.error
    assert picker.calls == []
    assert clipboard.values == []


def test_sink_failure_is_reported(make_collaborators):
    collab, _, _, _, _ = make_collaborators([])

    def broken_clipboard(text):
        raise CollaboratorInvocationError("clipboard", "no clipboard mechanism")

    collab.clipboard_sink = broken_clipboard

    result = run_selection(collab, path="wifi", field_key="password")

    assert not result.ok
    assert result.kind is ErrorKind.INVOCATION
    assert "secret" not in result.error
