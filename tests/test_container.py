"""Tests for the dependency injection container."""

import pytest

from restscribe.container import BindingCache, Container
from restscribe.exceptions import ContainerResolutionError, ValidationFailed
from restscribe.form_request import FormRequest


class Clock:
    def now(self):
        return "12:00"


class NeedsClock:
    def __init__(self, clock: Clock):
        self.clock = clock


class NeedsSecret:
    def __init__(self, secret):
        self.secret = secret


class Exploding:
    def __init__(self):
        raise RuntimeError("boom")


class StrictRequest(FormRequest):
    def rules(self):
        return {"title": "required|string"}


class TestBindingCache:
    def test_request_scope_is_cleared(self):
        cache = BindingCache()
        cache.set("a", 1)
        cache.clear()
        assert cache.get("a") is None

    def test_session_scope_persists(self):
        cache = BindingCache()
        cache.set("a", 1, "session")
        cache.clear()
        assert cache.get("a", "session") == 1


class TestContainerBuild:
    def test_autowires_annotated_classes(self):
        container = Container()
        instance = container.build(NeedsClock).unwrap()
        assert isinstance(instance.clock, Clock)

    def test_uses_type_binding(self):
        container = Container()
        clock = Clock()
        container.instance(Clock, clock)
        assert container.build(NeedsClock).unwrap().clock is clock

    def test_uses_name_binding(self):
        container = Container()
        container.bind("secret", lambda: "s3cr3t")
        assert container.build(NeedsSecret).unwrap().secret == "s3cr3t"

    def test_unresolvable_parameter_is_reported(self):
        resolution = Container().build(NeedsSecret)

        assert not resolution.ok
        assert isinstance(resolution.error, ContainerResolutionError)
        assert "secret" in resolution.error.message
        with pytest.raises(ContainerResolutionError):
            resolution.unwrap()

    def test_constructor_failure_is_captured(self):
        resolution = Container().build(Exploding)

        assert not resolution.ok
        assert isinstance(resolution.error.original_exception, RuntimeError)

    def test_build_does_not_validate(self):
        resolution = Container().build(StrictRequest)
        assert resolution.ok
        assert isinstance(resolution.instance, StrictRequest)

    def test_resolving_callbacks_fire_after_build(self):
        container = Container()
        seen = []
        container.resolving(FormRequest, seen.append)

        instance = container.build(StrictRequest).unwrap()

        assert seen == [instance]


class TestContainerMake:
    def test_make_validates_form_requests(self):
        with pytest.raises(ValidationFailed) as exc_info:
            Container().make(StrictRequest)
        assert "title" in exc_info.value.errors

    def test_resolve_is_make(self):
        instance = Container().resolve(NeedsClock)
        assert isinstance(instance.clock, Clock)

    def test_make_raises_on_build_failure(self):
        with pytest.raises(ContainerResolutionError):
            Container().make(NeedsSecret)


class TestBindingScopes:
    def test_request_scope_rebuilt_after_flush(self):
        container = Container()
        container.bind(Clock, Clock)

        first = container.build(NeedsClock).unwrap().clock
        again = container.build(NeedsClock).unwrap().clock
        container.flush_request_scope()
        after_flush = container.build(NeedsClock).unwrap().clock

        assert first is again
        assert after_flush is not first

    def test_session_scope_survives_flush(self):
        container = Container()
        container.bind(Clock, Clock, scope="session")

        first = container.build(NeedsClock).unwrap().clock
        container.flush_request_scope()

        assert container.build(NeedsClock).unwrap().clock is first

    def test_none_from_factory_is_cached(self):
        calls = []
        container = Container()
        container.bind("thing", lambda: calls.append(1))

        def handler(thing):
            return thing

        assert container.call(handler) is None
        assert container.call(handler) is None
        assert calls == [1]

    def test_call_injects_and_accepts_overrides(self):
        container = Container()
        container.bind("secret", lambda: "from-container")

        def handler(secret, clock: Clock, extra):
            return secret, clock, extra

        secret, clock, extra = container.call(handler, extra="given")

        assert secret == "from-container"
        assert isinstance(clock, Clock)
        assert extra == "given"
