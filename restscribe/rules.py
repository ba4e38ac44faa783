"""
Conversion of validation rule declarations into documented parameters.

Rules are declared per field, either as a pipe-separated string
(``"required|integer|min:1"``) or as a list whose items are rule strings or
rule objects. Rule objects that expose a ``docs()`` method contribute a
description and/or a type; other rule objects are ignored.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .examples import ExampleGenerator
from .exceptions import RuleParsingError
from .models import Parameter

logger = logging.getLogger(__name__)

NO_EXAMPLE = "No-example"

RuleSpec = Union[str, List[Any], Tuple[Any, ...]]

NUMERIC_TYPES = {"integer", "number"}


@dataclass
class Rule:
    """A single parsed rule: its name, its arguments and any custom docs."""

    name: str
    args: List[str] = field(default_factory=list)
    docs: Optional[Dict[str, Any]] = None


def _parse_rule_string(rule: str) -> Rule:
    name, _, raw_args = rule.strip().partition(":")
    name = name.strip().lower()
    if not raw_args:
        return Rule(name=name)
    if name in ("regex", "not_regex", "date_format"):
        return Rule(name=name, args=[raw_args])
    return Rule(name=name, args=[arg.strip() for arg in raw_args.split(",")])


def normalise_rules(spec: RuleSpec) -> List[Rule]:
    """Turn a rule declaration into a list of :class:`Rule`.

    Raises:
        RuleParsingError: If the declaration is neither a string nor a list.
    """
    if isinstance(spec, str):
        return [_parse_rule_string(part) for part in spec.split("|") if part.strip()]

    if not isinstance(spec, (list, tuple)):
        raise RuleParsingError(f"Unsupported rule declaration: {spec!r}")

    rules = []
    for item in spec:
        if isinstance(item, str):
            if item.strip():
                rules.append(_parse_rule_string(item))
        elif callable(getattr(item, "docs", None)):
            rules.append(Rule(name="custom", docs=dict(item.docs() or {})))
        else:
            logger.debug(f"Skipping undocumented rule object {type(item).__name__}")
    return rules


def _rule_map(rules: List[Rule]) -> Dict[str, Rule]:
    return {rule.name: rule for rule in rules if rule.name != "custom"}


def infer_type(rules: List[Rule], has_object_children: bool = False) -> str:
    names = _rule_map(rules)
    for rule in rules:
        if rule.docs and rule.docs.get("type"):
            return rule.docs["type"]
    if "integer" in names or "int" in names:
        return "integer"
    if "numeric" in names:
        return "number"
    if "boolean" in names or "bool" in names:
        return "boolean"
    if "file" in names or "image" in names:
        return "file"
    if "array" in names:
        return "object" if has_object_children else "array"
    return "string"


def _size_sentence(bound: str, value: str, type_name: str) -> str:
    if type_name in NUMERIC_TYPES:
        unit = ""
    elif type_name == "file":
        unit = " kilobytes"
    elif type_name in ("array", "object"):
        unit = " items"
    else:
        unit = " characters"

    if bound == "min":
        return f"Must be at least {value}{unit}."
    if bound == "max":
        return f"Must not be greater than {value}{unit}."
    return f"Must be {value}{unit}."


def describe_rules(rules: List[Rule], type_name: str) -> List[str]:
    """Build the human-readable sentences describing a field's rules."""
    sentences = []
    for rule in rules:
        if rule.docs and rule.docs.get("description"):
            sentences.append(rule.docs["description"])
        elif rule.name == "email":
            sentences.append("Must be a valid email address.")
        elif rule.name == "url":
            sentences.append("Must be a valid URL.")
        elif rule.name == "uuid":
            sentences.append("Must be a valid UUID.")
        elif rule.name == "date":
            sentences.append("Must be a valid date.")
        elif rule.name == "json":
            sentences.append("Must be a valid JSON string.")
        elif rule.name == "accepted":
            sentences.append("Must be accepted.")
        elif rule.name == "image":
            sentences.append("Must be an image.")
        elif rule.name == "date_format" and rule.args:
            sentences.append(f"Must be a valid date in the format `{rule.args[0]}`.")
        elif rule.name == "regex" and rule.args:
            sentences.append(f"Must match the regex `{rule.args[0]}`.")
        elif rule.name in ("min", "max", "size") and rule.args:
            sentences.append(_size_sentence(rule.name, rule.args[0], type_name))
        elif rule.name == "between" and len(rule.args) == 2:
            sentences.append(f"Must be between {rule.args[0]} and {rule.args[1]}.")
        elif rule.name == "in" and rule.args:
            options = [f"`{option}`" for option in rule.args]
            if len(options) == 1:
                sentences.append(f"Must be {options[0]}.")
            else:
                sentences.append(f"Must be one of {', '.join(options[:-1])} or {options[-1]}.")
    return sentences


def _as_number(value: str) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def generate_example(rules: List[Rule], type_name: str, generator: ExampleGenerator) -> Any:
    names = _rule_map(rules)

    if "in" in names and names["in"].args:
        option = generator.choice(names["in"].args)
        if type_name == "integer":
            return int(option) if option.lstrip("-").isdigit() else option
        return option
    if "email" in names:
        return generator.email()
    if "url" in names:
        return generator.url()
    if "uuid" in names:
        return generator.uuid()
    if "date" in names or "date_format" in names:
        return generator.date()

    minimum = maximum = None
    if "between" in names and len(names["between"].args) == 2:
        minimum, maximum = (_as_number(arg) for arg in names["between"].args)
    if "size" in names and names["size"].args:
        minimum = maximum = _as_number(names["size"].args[0])
    if "min" in names and names["min"].args:
        minimum = _as_number(names["min"].args[0])
    if "max" in names and names["max"].args:
        maximum = _as_number(names["max"].args[0])
    return generator.for_type(type_name, minimum, maximum)


def parameter_from_rules(
    name: str,
    rules: List[Rule],
    custom: Optional[Mapping[str, Any]],
    generator: ExampleGenerator,
    has_object_children: bool = False,
) -> Parameter:
    """Build a :class:`Parameter` from a field's rules and its custom metadata."""
    custom = dict(custom or {})
    names = _rule_map(rules)

    type_name = custom.get("type") or infer_type(rules, has_object_children)
    required = bool(custom.get("required", "required" in names))

    description_parts = []
    if custom.get("description"):
        description_parts.append(str(custom["description"]).strip())
    description_parts.extend(describe_rules(rules, type_name))

    no_example = False
    if "example" in custom:
        example = custom["example"]
        if example == NO_EXAMPLE:
            example = None
            no_example = True
    else:
        example = generate_example(rules, type_name, generator)

    return Parameter(
        name=name,
        type=type_name,
        description=" ".join(description_parts),
        required=required,
        nullable="nullable" in names,
        example=example,
        no_example=no_example,
    )


def get_parameters_from_validation_rules(
    validation_rules: Mapping[str, RuleSpec],
    custom_parameter_data: Optional[Mapping[str, Mapping[str, Any]]] = None,
    generator: Optional[ExampleGenerator] = None,
) -> Dict[str, Parameter]:
    """Convert a field -> rules mapping into documented parameters, keyed by field name."""
    custom_parameter_data = custom_parameter_data or {}
    generator = generator or ExampleGenerator()

    parameters: Dict[str, Parameter] = {}
    for name, spec in validation_rules.items():
        rules = normalise_rules(spec)
        has_object_children = any(
            other.startswith(f"{name}.") and not other.startswith(f"{name}.*")
            for other in validation_rules
        )
        parameters[name] = parameter_from_rules(
            name, rules, custom_parameter_data.get(name), generator, has_object_children
        )
    return parameters


def _parent_name(name: str) -> Optional[str]:
    """``tags.*`` -> ``tags``; ``items.*.id`` -> ``items``; ``meta.tag`` -> ``meta``."""
    if "." not in name:
        return None
    parent = name.rsplit(".", 1)[0]
    if parent.endswith(".*"):
        parent = parent[:-2]
    return parent


def _ensure(parameters: Dict[str, Parameter], name: str) -> Parameter:
    if name not in parameters:
        parameters[name] = Parameter(name=name, type="object", example={})
        if "." in name:
            _attach_to_parent(parameters, name)
    return parameters[name]


def _attach_to_parent(parameters: Dict[str, Parameter], name: str) -> None:
    child = parameters[name]

    if name.endswith(".*"):
        parent = _ensure(parameters, name[:-2])
        has_fields = any(other.startswith(f"{name}.") for other in parameters)
        if child.example is not None and (parent.type == "array" or not isinstance(parent.example, list)):
            parent.example = [child.example]
        parent.type = "object[]" if has_fields else f"{child.type}[]"
        if not parent.description:
            parent.description = child.description
        del parameters[name]
        return

    container, _, key = name.rpartition(".")
    if container.endswith(".*"):
        parent = _ensure(parameters, container[:-2])
        parent.type = "object[]"
        if not (isinstance(parent.example, list) and parent.example and isinstance(parent.example[0], dict)):
            parent.example = [{}]
        target = parent.example[0]
    else:
        parent = _ensure(parameters, container)
        if not parent.type.endswith("[]"):
            parent.type = "object"
        if not isinstance(parent.example, dict):
            parent.example = {}
        target = parent.example

    if child.example is not None and isinstance(target, dict):
        target[key] = child.example


def normalise_array_and_object_parameters(parameters: Dict[str, Parameter]) -> Dict[str, Parameter]:
    """Fold dotted parameter names into their parents.

    ``tags.*`` becomes the item type of ``tags`` (``string[]``) and is
    removed. ``items.*.id`` turns ``items`` into ``object[]`` and
    ``meta.tag`` turns ``meta`` into ``object``; those children are kept.
    Missing parents are created. Parents always precede their children
    in the returned mapping.
    """
    working = {name: parameter.model_copy(deep=True) for name, parameter in parameters.items()}

    for name in sorted(parameters, key=lambda n: -n.count(".")):
        if name in working and "." in name:
            _attach_to_parent(working, name)

    ordered: Dict[str, Parameter] = {}

    def _emit(name: Optional[str]) -> None:
        if name is None or name in ordered or name not in working:
            return
        _emit(_parent_name(name))
        ordered[name] = working[name]

    for name in list(parameters) + list(working):
        _emit(name)
    return ordered
