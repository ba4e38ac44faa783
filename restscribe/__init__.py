"""
API parameter documentation extracted from form requests.

restscribe reads the validation rules declared by form request classes,
merges in descriptions and examples provided by the form requests and by
``@urlParam`` docstring tags, and binds route placeholders to example model
instances so that rules depending on bound models can run while the
documentation is generated.
"""

from .bindings import RouteBindable, bind_route_parameters, resolve_route_bindings
from .config import ScribeConfig
from .container import Container, Resolution
from .docblock import DocBlock, Tag, parse_docblock
from .exceptions import ContainerResolutionError, RuleParsingError, ScribeError, ValidationFailed
from .extractor import Extractor
from .form_request import FormRequest, ValidationFactory, Validator
from .models import ExtractedEndpointData, HTTPMethod, Parameter
from .output import render_markdown, write_markdown
from .router import Route, Router

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "Container",
    "ContainerResolutionError",
    "DocBlock",
    "ExtractedEndpointData",
    "Extractor",
    "FormRequest",
    "HTTPMethod",
    "Parameter",
    "Resolution",
    "Route",
    "RouteBindable",
    "Router",
    "RuleParsingError",
    "ScribeConfig",
    "ScribeError",
    "Tag",
    "ValidationFactory",
    "ValidationFailed",
    "Validator",
    "bind_route_parameters",
    "parse_docblock",
    "render_markdown",
    "resolve_route_bindings",
    "write_markdown",
]
