"""
Resolution of route placeholders into bound model instances.

Given a route, its handler and the ``@urlParam`` examples documented on the
handler, each placeholder is matched to a typed handler parameter and the
parameter's type resolves the documented example into an instance. Rules
that look up bound models through ``request.route("post")`` then work while
documentation is being extracted.
"""

import inspect
import logging
import types
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Tuple, Union, get_args, get_origin, get_type_hints, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class RouteBindable(Protocol):
    """A type that can turn a raw route value (id, slug, uuid...) into an instance."""

    @classmethod
    def resolve_route_binding(cls, value: Any) -> Any:
        ...


def _unwrap_optional(annotation: Any) -> Any:
    """Return ``T`` for ``Optional[T]``, otherwise the annotation unchanged."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def get_method_parameters(handler: Callable) -> List[Tuple[str, Any]]:
    """Return ``(name, declared type)`` pairs for a handler, in declaration order.

    Parameters without an annotation are reported with a type of ``None``.
    """
    sig = inspect.signature(handler)
    try:
        hints = get_type_hints(handler)
    except (NameError, TypeError):
        hints = {}

    parameters = []
    for name, param in sig.parameters.items():
        annotation = hints.get(name, param.annotation)
        if annotation is inspect.Parameter.empty:
            annotation = None
        parameters.append((name, _unwrap_optional(annotation)))
    return parameters


def _matches(placeholder: str, param_name: str) -> bool:
    # Bindings registered under another name for the same model, e.g. post and post_cache
    return placeholder == param_name or placeholder.startswith(f"{param_name}_")


def _is_bindable(param_type: Any) -> bool:
    return inspect.isclass(param_type) and issubclass(param_type, RouteBindable)


def resolve_route_bindings(
    route: Any,
    handler: Callable,
    docblock_parameters: Mapping[str, Mapping[str, Any]],
) -> Dict[str, Any]:
    """Resolve every route placeholder that has a documented example.

    Args:
        route: The route whose ``wheres`` lists the placeholders.
        handler: The handler bound to the route.
        docblock_parameters: ``@urlParam`` data keyed by parameter name.

    Returns:
        Placeholder name -> resolved instance. Placeholders without a matching
        typed parameter or without an example are left out.
    """
    if not route.wheres:
        return {}

    method_parameters = get_method_parameters(handler)
    resolved: Dict[str, Any] = {}

    for placeholder in route.wheres:
        for param_name, param_type in method_parameters:
            if not _matches(placeholder, param_name):
                continue
            if not _is_bindable(param_type):
                continue

            example = (docblock_parameters.get(param_name) or {}).get("example")
            if example is None:
                continue

            resolved[placeholder] = param_type.resolve_route_binding(example)
            logger.debug(f"Bound route parameter '{placeholder}' to {param_type.__name__} using example {example!r}")
            break

    return resolved


def bind_route_parameters(
    route: Any,
    handler: Callable,
    docblock_parameters: Mapping[str, Mapping[str, Any]],
) -> Any:
    """Merge resolved bindings into the route's parameter bag and return the route."""
    for placeholder, value in resolve_route_bindings(route, handler, docblock_parameters).items():
        route.set_parameter(placeholder, value)
    return route


def make_route_resolver(
    route: Any,
    handler: Callable,
    request: Any,
    docblock_parameters: Optional[Mapping[str, Mapping[str, Any]]] = None,
    docblock_loader: Optional[Callable[[], Mapping[str, Mapping[str, Any]]]] = None,
) -> Callable[[], Any]:
    """Build the callable a form request uses to look up its route.

    The route is bound to the request and its placeholders are resolved the
    first time the callable runs; later calls return the same route.
    """
    resolved = False

    def resolver() -> Any:
        nonlocal resolved
        if resolved:
            return route
        resolved = True
        route.bind(request)
        if not route.wheres:
            return route
        parameters = docblock_parameters if docblock_parameters is not None else (docblock_loader() if docblock_loader else {})
        return bind_route_parameters(route, handler, parameters)

    return resolver
