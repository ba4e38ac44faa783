"""Router module describing the routes to document, with mounting support."""

import re
from typing import Any, Callable, Dict, List, Optional, Tuple

from .models import HTTPMethod

DEFAULT_CONSTRAINT = "[^/]+"

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\??\}")


class Route:
    """Represents a registered route, its handler and its parameter bag.

    ``wheres`` maps every placeholder in the path to its constraint. The
    parameter bag starts empty and is filled with bound values while a
    form request is being documented.
    """

    def __init__(self, method: HTTPMethod, path: str, handler: Callable, wheres: Optional[Dict[str, str]] = None):
        self.method = method
        self.path = path
        self.handler = handler
        self.wheres: Dict[str, str] = {name: DEFAULT_CONSTRAINT for name in self.placeholders()}
        if wheres:
            self.wheres.update({name: pattern for name, pattern in wheres.items() if name in self.wheres})
        self.declared_wheres: Dict[str, str] = dict(wheres or {})
        self.parameters: Dict[str, Any] = {}
        self.bound_request: Any = None

    def placeholders(self) -> List[str]:
        return PLACEHOLDER_PATTERN.findall(self.path)

    def bind(self, request: Any) -> "Route":
        """Attach the request currently being handled to this route."""
        self.bound_request = request
        return self

    def set_parameter(self, name: str, value: Any) -> None:
        self.parameters[name] = value

    def parameter(self, name: str, default: Any = None) -> Any:
        return self.parameters.get(name, default)

    def __repr__(self) -> str:
        return f"<Route {self.method.value} {self.path}>"


def normalize_path(prefix: str, path: str) -> str:
    """Normalize a path by combining prefix and path, handling double slashes.

    Examples:
        normalize_path("/", "/users") -> "/users"
        normalize_path("/api", "users") -> "/api/users"
        normalize_path("/api/", "/users") -> "/api/users"
    """
    if not prefix.startswith('/'):
        prefix = '/' + prefix

    if prefix != '/' and prefix.endswith('/'):
        prefix = prefix.rstrip('/')

    if not path.startswith('/'):
        path = '/' + path

    if prefix == '/':
        return path

    return prefix + path


class Router:
    """Router class for declaring the routes to document.

    Routers can be mounted into other routers under a prefix. Global
    placeholder patterns registered with :meth:`pattern` apply to every
    route of this router that does not declare its own constraint.
    """

    def __init__(self):
        self._routes: List[Route] = []
        self._mounted_routers: List[Tuple[str, "Router"]] = []
        self._patterns: Dict[str, str] = {}

    def pattern(self, name: str, constraint: str) -> None:
        """Register a constraint applied to every ``{name}`` placeholder."""
        self._patterns[name] = constraint

    def mount(self, prefix: str, router: "Router"):
        """Mount another router with a given prefix."""
        self._mounted_routers.append((prefix, router))

    def get_all_routes(self, prefix: str = "") -> List[Tuple[str, Route]]:
        """Get all routes from this router and mounted routers.

        Returns:
            List of (path, route) tuples
        """
        routes = []

        for route in self._routes:
            normalized_path = normalize_path(prefix, route.path)
            wheres = dict(self._patterns)
            wheres.update(route.declared_wheres)
            routes.append((normalized_path, Route(route.method, normalized_path, route.handler, wheres)))

        for mount_prefix, mounted_router in self._mounted_routers:
            combined_prefix = normalize_path(prefix, mount_prefix)
            for path, route in mounted_router.get_all_routes(combined_prefix):
                wheres = dict(self._patterns)
                wheres.update(route.declared_wheres)
                routes.append((path, Route(route.method, path, route.handler, wheres)))

        return routes

    def routes(self) -> List[Route]:
        return [route for _, route in self.get_all_routes()]

    def get(self, path: str, where: Optional[Dict[str, str]] = None):
        """Decorator to register a GET route handler."""
        return self._route_decorator(HTTPMethod.GET, path, where)

    def post(self, path: str, where: Optional[Dict[str, str]] = None):
        """Decorator to register a POST route handler."""
        return self._route_decorator(HTTPMethod.POST, path, where)

    def put(self, path: str, where: Optional[Dict[str, str]] = None):
        """Decorator to register a PUT route handler."""
        return self._route_decorator(HTTPMethod.PUT, path, where)

    def delete(self, path: str, where: Optional[Dict[str, str]] = None):
        """Decorator to register a DELETE route handler."""
        return self._route_decorator(HTTPMethod.DELETE, path, where)

    def patch(self, path: str, where: Optional[Dict[str, str]] = None):
        """Decorator to register a PATCH route handler."""
        return self._route_decorator(HTTPMethod.PATCH, path, where)

    def _route_decorator(self, method: HTTPMethod, path: str, where: Optional[Dict[str, str]]):
        """Internal method to create route decorators."""

        def decorator(func: Callable):
            route = Route(method, path, func, where)
            self._routes.append(route)
            return func

        return decorator
