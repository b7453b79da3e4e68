"""Behavior tests for Command, the non-generic result."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st
import pytest

from resultwise import Command, InvalidStateError, Query, Result, ValidationError

pytestmark = pytest.mark.unit

error_text = st.text(min_size=1).filter(lambda s: s.strip() != "")


# --- Construction ---


def test_ok_returns_shared_success() -> None:
    assert Command.ok() is Command.ok()
    assert Command.ok().is_success is True
    assert Command.ok().is_failure is False


def test_result_is_an_alias_of_command() -> None:
    assert Result is Command


@given(error=error_text)
def test_fail_is_failure_for_any_valid_error(error: str) -> None:
    cmd = Command.fail(error)
    assert cmd.is_failure is True
    assert cmd.is_success is False
    assert cmd.error == error


@pytest.mark.parametrize("bad_error", [None, "", "   ", "\t\n"])
def test_fail_rejects_blank_error(bad_error) -> None:
    with pytest.raises(ValidationError) as exc:
        Command.fail(bad_error)
    assert exc.value.param_name == "error"


def test_error_on_success_raises_invalid_state() -> None:
    with pytest.raises(InvalidStateError):
        _ = Command.ok().error


def test_message_formats_failure() -> None:
    assert Command.fail("disk full").message == "Command Failure (disk full)."


def test_message_on_success_defaults_and_can_be_set() -> None:
    assert Command.ok().message == "OK"
    assert Command.ok("saved").message == "saved"
    assert Command.ok("saved").is_success


def test_ok_rejects_blank_message() -> None:
    with pytest.raises(ValidationError):
        Command.ok("  ")


def test_commands_are_immutable_values() -> None:
    cmd = Command.fail("a")
    assert cmd == Command.fail("a")
    assert cmd != Command.fail("b")
    with pytest.raises(AttributeError):
        cmd._error = "b"  # type: ignore[misc]


def test_repr_names_the_variant() -> None:
    assert repr(Command.ok()) == "Command.ok()"
    assert repr(Command.fail("x")) == "Command.fail('x')"


# --- first_failure_or_success / combine ---


def test_first_failure_wins() -> None:
    result = Command.first_failure_or_success(
        Command.ok(), Command.fail("a"), Command.fail("b")
    )
    assert result.is_failure
    assert result.error == "a"


def test_first_failure_or_success_with_only_successes() -> None:
    assert Command.first_failure_or_success(Command.ok(), Command.ok()).is_success


def test_first_failure_or_success_empty_is_success() -> None:
    assert Command.first_failure_or_success().is_success


def test_first_failure_or_success_accepts_queries() -> None:
    result = Command.first_failure_or_success(Query.ok(1), Query.fail("missing"))
    assert isinstance(result, Command)
    assert result.error == "missing"


def test_first_failure_or_success_rejects_none_element() -> None:
    with pytest.raises(ValidationError):
        Command.first_failure_or_success(Command.ok(), None)  # type: ignore[arg-type]


def test_combine_joins_all_failures_in_order() -> None:
    result = Command.combine(Command.ok(), Command.fail("a"), Command.fail("b"))
    assert result.is_failure
    assert result.error == "a; b"


def test_combine_with_custom_separator() -> None:
    result = Command.combine(Command.fail("a"), Command.fail("b"), separator=", ")
    assert result.error == "a, b"


def test_combine_without_failures_is_success() -> None:
    assert Command.combine(Command.ok(), Query.ok("x")).is_success
    assert Command.combine().is_success


def test_combine_mixes_commands_and_queries() -> None:
    result = Command.combine(Query.fail("q"), Command.fail("c"))
    assert result.error == "q; c"


@pytest.mark.parametrize("combinator", [Command.combine, Command.first_failure_or_success])
def test_combinators_reject_a_list_argument(combinator) -> None:
    with pytest.raises(ValidationError) as exc:
        combinator([Command.ok(), Command.fail("a")])
    assert exc.value.param_name == "results[0]"


def test_combine_rejects_none_separator() -> None:
    with pytest.raises(ValidationError):
        Command.combine(Command.fail("a"), separator=None)  # type: ignore[arg-type]


@given(errors=st.lists(error_text, min_size=1, max_size=5))
def test_combine_preserves_every_error(errors: list[str]) -> None:
    result = Command.combine(*(Command.fail(e) for e in errors))
    assert result.error == "; ".join(errors)


# --- Combinators ---


def test_on_success_runs_action_and_returns_self() -> None:
    calls: list[str] = []
    cmd = Command.ok()
    assert cmd.on_success(lambda: calls.append("ran")) is cmd
    assert calls == ["ran"]


def test_on_success_returns_command_produced_by_fn() -> None:
    result = Command.ok().on_success(lambda: Command.fail("next step failed"))
    assert result.error == "next step failed"


def test_on_success_skips_failures() -> None:
    calls: list[str] = []
    failed = Command.fail("boom")
    assert failed.on_success(lambda: calls.append("ran")) is failed
    assert calls == []


def test_then_continues_into_a_query() -> None:
    result = Command.ok().then(lambda: Query.ok(5))
    assert result.value == 5


def test_then_retypes_failure_without_calling() -> None:
    def explode() -> Query[int]:
        raise AssertionError("must not be called")

    result = Command.fail("boom").then(explode)
    assert isinstance(result, Query)
    assert result.error == "boom"


def test_map_wraps_value_in_query() -> None:
    assert Command.ok().map(lambda: "value").value == "value"


def test_map_on_failure_keeps_error() -> None:
    result = Command.fail("boom").map(lambda: "value")
    assert isinstance(result, Query)
    assert result.error == "boom"


def test_on_failure_passes_error_when_accepted() -> None:
    seen: list[str] = []
    Command.fail("boom").on_failure(seen.append)
    Command.fail("bang").on_failure(lambda error: seen.append(error.upper()))
    assert seen == ["boom", "BANG"]


def test_on_failure_without_argument() -> None:
    seen: list[str] = []
    Command.fail("boom").on_failure(lambda: seen.append("called"))
    Command.ok().on_failure(lambda: seen.append("not called"))
    assert seen == ["called"]


def test_on_both_always_runs() -> None:
    assert Command.ok().on_both(lambda c: c.is_success) is True
    assert Command.fail("x").on_both(lambda c: c.message) == "Command Failure (x)."


def test_ensure_passes_through_when_predicate_holds() -> None:
    cmd = Command.ok()
    assert cmd.ensure(lambda: True, "never") is cmd


def test_ensure_fails_with_message_when_predicate_false() -> None:
    assert Command.ok().ensure(lambda: False, "closed").error == "closed"


def test_ensure_propagates_existing_failure() -> None:
    result = Command.fail("first").ensure(lambda: False, "second")
    assert result.error == "first"


@pytest.mark.parametrize(
    "call",
    [
        lambda c: c.on_success(None),
        lambda c: c.then(None),
        lambda c: c.map(None),
        lambda c: c.on_failure(None),
        lambda c: c.on_both(None),
        lambda c: c.ensure(None, "error"),
        lambda c: c.ensure(lambda: True, ""),
    ],
)
def test_combinators_reject_missing_callables(call) -> None:
    with pytest.raises(ValidationError):
        call(Command.ok())
