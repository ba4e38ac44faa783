"""
URL parameter strategies: ``@urlParam`` docstring tags and bare route placeholders.

Tag format::

    @urlParam post integer required The post to show. Example: 42
    @urlParam locale The locale to use. No-example
"""

import re
from typing import Any, Dict, List, Optional

from ..docblock import Tag, get_doc_blocks_from_route
from ..models import ExtractedEndpointData, Parameter
from .base import Strategy

KNOWN_TYPES = {"string", "integer", "int", "number", "float", "boolean", "bool", "object", "array", "file"}

TYPE_ALIASES = {"int": "integer", "float": "number", "bool": "boolean"}

EXAMPLE_PATTERN = re.compile(r"^(.*?)\s*\bExample:\s*(.+?)\s*$", re.DOTALL)

NO_EXAMPLE_PATTERN = re.compile(r"\s*\bNo-example\.?\s*")


def _is_type(token: str) -> bool:
    base = token[:-2] if token.endswith("[]") else token
    return base in KNOWN_TYPES


def cast_example(value: str, type_name: str) -> Any:
    """Convert a tag example to the parameter's type, keeping the text when it does not convert."""
    try:
        if type_name == "integer":
            return int(value)
        if type_name == "number":
            return float(value)
    except ValueError:
        return value
    if type_name == "boolean":
        lowered = value.lower()
        if lowered in ("true", "1"):
            return True
        if lowered in ("false", "0"):
            return False
    return value


def parse_url_param_tag(content: str) -> Optional[Dict[str, Any]]:
    """Parse the content of one ``@urlParam`` tag, or return None if it names nothing."""
    tokens = content.split(None, 1)
    if not tokens:
        return None
    name = tokens[0]
    rest = tokens[1] if len(tokens) > 1 else ""

    type_name = "string"
    head = rest.split(None, 1)
    if head and _is_type(head[0]):
        type_name = head[0]
        type_name = TYPE_ALIASES.get(type_name, type_name)
        rest = head[1] if len(head) > 1 else ""

    required = False
    head = rest.split(None, 1)
    if head and head[0] == "required":
        required = True
        rest = head[1] if len(head) > 1 else ""

    no_example = bool(NO_EXAMPLE_PATTERN.search(rest))
    if no_example:
        rest = NO_EXAMPLE_PATTERN.sub(" ", rest)

    example = None
    match = EXAMPLE_PATTERN.match(rest)
    if match and not no_example:
        rest, raw_example = match.group(1), match.group(2)
        example = cast_example(raw_example, type_name)

    return {
        "name": name,
        "type": type_name,
        "description": rest.strip(),
        "required": required,
        "example": example,
        "no_example": no_example,
    }


def get_url_parameters_from_docblock(tags: List[Tag]) -> Dict[str, Dict[str, Any]]:
    """Collect the ``@urlParam`` tags of a docstring, keyed by parameter name."""
    parameters = {}
    for tag in tags:
        if tag.name.lower() != "urlparam":
            continue
        parsed = parse_url_param_tag(tag.content)
        if parsed is not None:
            parameters[parsed["name"]] = parsed
    return parameters


class GetFromUrlParamTag(Strategy):
    """Documents URL parameters described by ``@urlParam`` tags on the handler."""

    def __call__(self, endpoint_data: ExtractedEndpointData) -> Optional[Dict[str, Parameter]]:
        method_docblock = get_doc_blocks_from_route(endpoint_data.route)["method"]
        tagged = get_url_parameters_from_docblock(method_docblock.get_tags())
        if not tagged:
            return None

        parameters = {}
        for name, data in tagged.items():
            example = data["example"]
            if example is None and not data["no_example"]:
                example = self.generator.for_type(data["type"])
            parameters[name] = Parameter(
                name=name,
                type=data["type"],
                description=data["description"],
                required=data["required"],
                example=example,
                no_example=data["no_example"],
            )
        return parameters


class GetFromUrlPath(Strategy):
    """Documents every route placeholder as a string, so undocumented ones still appear."""

    def __call__(self, endpoint_data: ExtractedEndpointData) -> Optional[Dict[str, Parameter]]:
        route = endpoint_data.route
        if route is None:
            return None

        parameters = {}
        for name in route.placeholders():
            optional = f"{{{name}?}}" in route.path
            parameters[name] = Parameter(
                name=name,
                type="string",
                required=not optional,
                example=self.generator.for_type("string"),
            )
        return parameters
