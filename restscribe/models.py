"""
Core data models for extracted documentation.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .router import Route


class HTTPMethod(Enum):
    """Enumeration of supported HTTP methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class Parameter(BaseModel):
    """A documented request parameter (URL, query string or body)."""

    name: str
    type: str = "string"
    description: str = ""
    required: bool = False
    nullable: bool = False
    example: Any = None
    # True when the author explicitly asked for no example ("No-example")
    no_example: bool = False

    def merged_with(self, other: "Parameter") -> "Parameter":
        """Return a copy of this parameter overridden by the explicitly set fields of ``other``."""
        data = self.model_dump()
        data.update(other.model_dump(exclude_unset=True))
        return Parameter(**data)


class ExtractedEndpointData(BaseModel):
    """Everything extracted for a single route/handler pair."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_method: HTTPMethod
    uri: str
    handler: Callable
    route: Any = Field(default=None, exclude=True)
    title: str = ""
    description: str = ""
    url_parameters: Dict[str, Parameter] = Field(default_factory=dict)
    query_parameters: Dict[str, Parameter] = Field(default_factory=dict)
    body_parameters: Dict[str, Parameter] = Field(default_factory=dict)
    extraction_errors: List[str] = Field(default_factory=list)

    @classmethod
    def from_route(cls, route: "Route") -> "ExtractedEndpointData":
        from .docblock import get_doc_blocks_from_route

        method_docblock = get_doc_blocks_from_route(route)["method"]
        return cls(
            http_method=route.method,
            uri=route.path,
            handler=route.handler,
            route=route,
            title=method_docblock.summary,
            description=method_docblock.description,
        )

    def get_parameters(self, stage: str) -> Dict[str, Parameter]:
        return getattr(self, stage)

    def has_errors(self) -> bool:
        return bool(self.extraction_errors)

    def to_dict(self) -> Dict[str, Any]:
        """Serialisable view used by the output writers."""
        return {
            "method": self.http_method.value,
            "uri": self.uri,
            "title": self.title,
            "description": self.description,
            "url_parameters": [p.model_dump() for p in self.url_parameters.values()],
            "query_parameters": [p.model_dump() for p in self.query_parameters.values()],
            "body_parameters": [p.model_dump() for p in self.body_parameters.values()],
            "errors": list(self.extraction_errors),
        }


STAGES = ("url_parameters", "query_parameters", "body_parameters")

