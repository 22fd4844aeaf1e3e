"""Tests for option resolution and the callback registry."""

import logging

import pytest

from timerprogress.timer.callbacks import CallbackRegistry
from timerprogress.timer.errors import UnknownEventError
from timerprogress.timer.options import (
    DEFAULT_DELAY_MS, RestartPolicy, TimerOptions, resolve_options,
)


# ═══════════════════════════════════════════════════════════════════════════
#  RESOLVER
# ═══════════════════════════════════════════════════════════════════════════


class TestResolveOptions:

    def test_empty_bag_gives_defaults(self):
        options, callbacks = resolve_options()
        assert options == TimerOptions(
            duration=None,
            delay=DEFAULT_DELAY_MS,
            restart_policy=RestartPolicy.AUTO_DECIDE,
            auto_start=False,
        )
        assert len(callbacks) == 0

    def test_duration_enables_auto_start(self):
        options, _ = resolve_options({"duration": 5000})
        assert options.duration == 5000
        assert options.auto_start is True

    def test_falsy_values_fall_back(self):
        options, _ = resolve_options({"duration": 0, "delay": 0})
        assert options.duration is None
        assert options.delay == DEFAULT_DELAY_MS
        assert options.auto_start is False

    def test_explicit_auto_start_wins(self):
        options, _ = resolve_options({"duration": 5000, "auto_start": False})
        assert options.auto_start is False
        options, _ = resolve_options({"auto_start": 1})
        assert options.auto_start is True

    @pytest.mark.parametrize("raw, policy", [
        (True, RestartPolicy.FORCE_RESTART),
        ("yes", RestartPolicy.FORCE_RESTART),
        (False, RestartPolicy.FORCE_STOP),
        (0, RestartPolicy.FORCE_STOP),
        (None, RestartPolicy.FORCE_STOP),
    ])
    def test_present_restart_is_coerced(self, raw, policy):
        options, _ = resolve_options({"restart": raw})
        assert options.restart_policy is policy

    def test_hooks_registered_first(self):
        update = lambda running, progress, remaining: None  # noqa: E731
        pause = lambda: False  # noqa: E731
        complete = lambda: True  # noqa: E731
        _, callbacks = resolve_options(
            {"update": update, "pause": pause, "complete": complete}
        )
        assert callbacks.update == [update]
        assert callbacks.pause == [pause]
        assert callbacks.complete == [complete]

    def test_non_callable_hook_ignored(self, caplog):
        with caplog.at_level(logging.WARNING):
            _, callbacks = resolve_options({"complete": True})
        assert callbacks.complete == []
        assert "non-callable" in caplog.text

    def test_unknown_keys_warn(self, caplog):
        with caplog.at_level(logging.WARNING):
            options, _ = resolve_options({"autoStart": True, "duration": 10})
        assert "autoStart" in caplog.text
        assert options.auto_start is True  # from duration, not the typo

    def test_options_are_immutable(self):
        options, _ = resolve_options({"duration": 10})
        with pytest.raises(AttributeError):
            options.duration = 20


# ═══════════════════════════════════════════════════════════════════════════
#  REGISTRY
# ═══════════════════════════════════════════════════════════════════════════


class TestCallbackRegistry:

    def test_update_hooks_called_in_order(self):
        registry = CallbackRegistry()
        calls = []
        registry.register("update", lambda *a: calls.append(("a", a)))
        registry.register("update", lambda *a: calls.append(("b", a)))
        registry.run_update(True, 50.0, 1000)
        assert calls == [("a", (True, 50.0, 1000)), ("b", (True, 50.0, 1000))]

    def test_empty_registry_is_never_paused_nor_restarting(self):
        registry = CallbackRegistry()
        assert registry.any_pause() is False
        assert registry.run_complete() is False

    def test_pause_short_circuits(self):
        registry = CallbackRegistry()
        later = []
        registry.register("pause", lambda: True)
        registry.register("pause", lambda: later.append(1) or False)
        assert registry.any_pause() is True
        assert later == []

    def test_complete_runs_every_hook(self):
        registry = CallbackRegistry()
        later = []
        registry.register("complete", lambda: True)
        registry.register("complete", lambda: later.append(1) or False)
        assert registry.run_complete() is True
        assert later == [1]

    def test_truthy_results_count(self):
        registry = CallbackRegistry()
        registry.register("complete", lambda: "restart please")
        assert registry.run_complete() is True

    def test_unknown_event(self):
        with pytest.raises(UnknownEventError, match="unknown event"):
            CallbackRegistry().register("finish", lambda: True)

    def test_non_callable(self):
        with pytest.raises(TypeError):
            CallbackRegistry().register("pause", "nope")
