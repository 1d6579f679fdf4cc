"""Tests for the hook registry."""

import pytest


def test_filters_run_in_priority_then_registration_order(hooks):
    hooks.add_filter("title", lambda v: v + "b")
    hooks.add_filter("title", lambda v: v + "a", priority=5)
    hooks.add_filter("title", lambda v: v + "c")

    assert hooks.apply_filters("title", "") == "abc"


def test_filter_without_callbacks_returns_value(hooks):
    assert hooks.apply_filters("nothing", 42, "extra") == 42


def test_extra_arguments_and_accepted_args(hooks):
    hooks.add_filter("label", lambda v, key, ctx: f"{v}:{key}:{ctx}")
    hooks.add_filter("label", lambda v: v.upper(), accepted_args=1)

    assert hooks.apply_filters("label", "x", "k", "c") == "X:K:C"


def test_actions_are_counted(hooks):
    seen = []
    hooks.add_action("routed", lambda: seen.append(hooks.current_action()))

    assert hooks.did_action("routed") == 0
    hooks.do_action("routed")
    hooks.do_action("routed")

    assert hooks.did_action("routed") == 2
    assert seen == ["routed", "routed"]
    assert hooks.current_action() is None


def test_doing_action_inside_callback(hooks):
    inside = []
    hooks.add_action("outer", lambda: inside.append(hooks.doing_action("outer")))

    hooks.do_action("outer")

    assert inside == [True]
    assert not hooks.doing_action()


def test_remove_filter(hooks):
    def shout(value):
        return value.upper()

    hooks.add_filter("text", shout)
    assert hooks.has_filter("text", shout)

    assert hooks.remove_filter("text", shout)
    assert not hooks.has_filter("text")
    assert hooks.remove_filter("text", shout) is False
    assert hooks.apply_filters("text", "quiet") == "quiet"


def test_remove_filter_respects_priority(hooks):
    def tag(value):
        return value + "!"

    hooks.add_filter("text", tag, priority=20)

    assert hooks.remove_filter("text", tag, priority=10) is False
    assert hooks.remove_filter("text", tag, priority=20)


def test_non_callable_is_rejected(hooks):
    with pytest.raises(TypeError):
        hooks.add_filter("text", "not a function")


def test_callback_errors_propagate_and_reset_state(hooks):
    def boom(value):
        raise RuntimeError("boom")

    hooks.add_filter("text", boom)

    with pytest.raises(RuntimeError):
        hooks.apply_filters("text", "x")
    assert hooks.current_filter() is None
