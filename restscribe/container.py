"""
Dependency injection container used to build form requests.
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Literal, Optional, Type, Union, get_type_hints

from .exceptions import ContainerResolutionError

logger = logging.getLogger(__name__)

BindingScope = Literal["request", "session"]


class BindingCache:
    """Cache for resolved bindings with support for request and session scopes.

    - Request scope: Instances are cached while documenting a single route and cleared between routes.
    - Session scope: Instances are cached for the whole documentation run and never cleared automatically.
    """

    def __init__(self):
        self._request_cache: Dict[Any, Any] = {}
        self._session_cache: Dict[Any, Any] = {}

    def get(self, key: Any, scope: BindingScope = "request") -> Any:
        if scope == "session":
            return self._session_cache.get(key)
        return self._request_cache.get(key)

    def contains(self, key: Any, scope: BindingScope = "request") -> bool:
        if scope == "session":
            return key in self._session_cache
        return key in self._request_cache

    def set(self, key: Any, value: Any, scope: BindingScope = "request") -> None:
        if scope == "session":
            self._session_cache[key] = value
        else:
            self._request_cache[key] = value

    def clear(self) -> None:
        """Clear only the request-scoped cache. Session cache persists."""
        self._request_cache.clear()


class Binding:
    """A factory registered for a name or a type, with its scope."""

    def __init__(self, factory: Callable, scope: BindingScope = "request"):
        self.factory = factory
        self.scope = scope


@dataclass
class Resolution:
    """Outcome of building a class: either an instance or the error that prevented it."""

    target: type
    instance: Any = None
    error: Optional[ContainerResolutionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the instance, raising the captured error if construction failed."""
        if self.error is not None:
            raise self.error
        return self.instance


class Container:
    """Builds objects by injecting constructor parameters by name or by type.

    Parameters are looked up in this order: an explicit binding for the
    parameter's type, an explicit binding for the parameter's name, the
    parameter's default value, and finally auto-wiring of the annotated class.
    """

    def __init__(self):
        self._bindings: Dict[Union[str, type], Binding] = {}
        self._resolving_callbacks: List[tuple] = []
        self._cache = BindingCache()

    def bind(self, key: Union[str, type], factory: Callable, scope: BindingScope = "request") -> None:
        """Register a factory for a parameter name or a type."""
        self._bindings[key] = Binding(factory, scope)

    def instance(self, key: Union[str, type], value: Any) -> None:
        """Register an already-built value for the whole session."""
        self._bindings[key] = Binding(lambda: value, "session")

    def resolving(self, target: type, callback: Callable[[Any], None]) -> None:
        """Register a callback fired with every newly built instance of ``target``."""
        self._resolving_callbacks.append((target, callback))

    def flush_request_scope(self) -> None:
        self._cache.clear()

    def build(self, target: Type) -> Resolution:
        """Construct ``target`` without running any post-construction validation."""
        try:
            instance = self._construct(target)
        except ContainerResolutionError as e:
            logger.debug(f"Could not build {target.__name__}: {e}")
            return Resolution(target=target, error=e)
        except Exception as e:
            logger.debug(f"Constructor of {target.__name__} raised {type(e).__name__}: {e}")
            return Resolution(
                target=target,
                error=ContainerResolutionError(
                    f"Unable to build {target.__name__}: {e}", target=target, original_exception=e
                ),
            )
        self._fire_resolving_callbacks(target, instance)
        return Resolution(target=target, instance=instance)

    def make(self, target: Type) -> Any:
        """Construct ``target`` and validate it if it knows how to validate itself.

        Raises:
            ContainerResolutionError: If the class cannot be built.
            ValidationFailed: If the built object rejects its own state.
        """
        instance = self.build(target).unwrap()
        validate = getattr(instance, "validate_resolved", None)
        if callable(validate):
            validate()
        return instance

    resolve = make

    def call(self, func: Callable, **overrides: Any) -> Any:
        """Call a function, injecting its parameters."""
        kwargs = self._resolve_parameters(func, overrides)
        return func(**kwargs)

    def _fire_resolving_callbacks(self, target: type, instance: Any) -> None:
        for registered, callback in self._resolving_callbacks:
            if isinstance(registered, type) and isinstance(instance, registered):
                callback(instance)

    def _construct(self, target: Type) -> Any:
        if not inspect.isclass(target):
            raise ContainerResolutionError(f"Cannot build non-class target {target!r}", target=target)
        if target in self._bindings:
            return self._resolve_binding(target)
        kwargs = self._resolve_parameters(target, {})
        return target(**kwargs)

    def _resolve_binding(self, key: Union[str, type]) -> Any:
        binding = self._bindings[key]
        if self._cache.contains(key, binding.scope):
            return self._cache.get(key, binding.scope)
        value = self.call(binding.factory)
        self._cache.set(key, value, binding.scope)
        return value

    def _resolve_parameters(self, func: Callable, overrides: Dict[str, Any]) -> Dict[str, Any]:
        target = func.__init__ if inspect.isclass(func) else func
        sig = inspect.signature(func)
        try:
            hints = get_type_hints(target)
        except (NameError, TypeError):
            hints = {}

        kwargs = {}
        for param_name, param in sig.parameters.items():
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            if param_name in overrides:
                kwargs[param_name] = overrides[param_name]
                continue
            param_type = hints.get(param_name)
            if param_type is None and param.annotation is not inspect.Parameter.empty:
                param_type = param.annotation
            kwargs[param_name] = self._resolve_parameter(func, param_name, param, param_type)
        return kwargs

    def _resolve_parameter(self, owner: Callable, param_name: str, param: inspect.Parameter, param_type: Any) -> Any:
        if isinstance(param_type, type) and param_type in self._bindings:
            return self._resolve_binding(param_type)
        if param_name in self._bindings:
            return self._resolve_binding(param_name)
        if param.default is not inspect.Parameter.empty:
            return param.default
        if inspect.isclass(param_type) and param_type.__module__ != "builtins":
            return self._construct(param_type)

        owner_name = getattr(owner, "__name__", repr(owner))
        raise ContainerResolutionError(
            f"Unable to resolve parameter '{param_name}' of {owner_name}", target=owner if inspect.isclass(owner) else None
        )
