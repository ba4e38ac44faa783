"""
Form requests: request objects that declare their own validation rules.

Building a form request and validating it are two separate steps. The
container builds the object; :meth:`FormRequest.validate_resolved` runs the
validation only when the caller asks for it, so documentation tooling can
read rules from a form request without feeding it real input.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from .exceptions import ValidationFailed
from .rules import RuleSpec, normalise_rules


class Validator:
    """Holds the data and rules produced for one form request."""

    def __init__(self, data: Mapping[str, Any], rules: Mapping[str, RuleSpec]):
        self.data = dict(data)
        self._rules = dict(rules)

    def get_rules(self) -> Dict[str, RuleSpec]:
        return dict(self._rules)

    def errors(self) -> Dict[str, List[str]]:
        """Report missing required fields. Other rules are not evaluated."""
        errors: Dict[str, List[str]] = {}
        for name, spec in self._rules.items():
            required = any(rule.name == "required" for rule in normalise_rules(spec))
            if required and self.data.get(name) in (None, ""):
                errors.setdefault(name, []).append(f"The {name} field is required.")
        return errors

    def fails(self) -> bool:
        return bool(self.errors())


class ValidationFactory:
    """Creates validators. Bound in the container so form requests can receive it."""

    def make(self, data: Mapping[str, Any], rules: Mapping[str, RuleSpec]) -> Validator:
        return Validator(data, rules)


@runtime_checkable
class ProvidesValidator(Protocol):
    """A form request that builds its own validator instead of exposing rules()."""

    def validator(self, factory: ValidationFactory) -> Validator:
        ...


@runtime_checkable
class ProvidesBodyParameters(Protocol):
    """A form request carrying descriptions and examples for its body fields."""

    def body_parameters(self) -> Mapping[str, Mapping[str, Any]]:
        ...


@runtime_checkable
class ProvidesQueryParameters(Protocol):
    """A form request carrying descriptions and examples for its query fields."""

    def query_parameters(self) -> Mapping[str, Mapping[str, Any]]:
        ...


class FormRequest:
    """Base class for form requests.

    Subclasses override :meth:`rules` and may declare extra constructor
    parameters, which the container injects.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self.data: Dict[str, Any] = dict(data or {})
        self._route_resolver: Optional[Callable[[], Any]] = None

    def rules(self) -> Mapping[str, RuleSpec]:
        return {}

    def authorize(self) -> bool:
        return True

    def set_route_resolver(self, resolver: Callable[[], Any]) -> None:
        self._route_resolver = resolver

    def route(self, name: Optional[str] = None, default: Any = None) -> Any:
        """Return the current route, or one of its bound parameters when ``name`` is given."""
        if self._route_resolver is None:
            return default if name is not None else None
        route = self._route_resolver()
        if name is None:
            return route
        return route.parameter(name, default)

    def get_rules(self, factory: Optional[ValidationFactory] = None) -> Mapping[str, RuleSpec]:
        """Return the rules through :meth:`validator` when the request provides one."""
        if isinstance(self, ProvidesValidator):
            return self.validator(factory or ValidationFactory()).get_rules()
        return self.rules()

    def validate_resolved(self) -> None:
        """Validate the request data against its rules.

        Raises:
            ValidationFailed: If the request is not authorized or a required field is missing.
        """
        if not self.authorize():
            raise ValidationFailed({}, message="This action is unauthorized.")
        validator = ValidationFactory().make(self.data, self.get_rules())
        errors = validator.errors()
        if errors:
            raise ValidationFailed(errors)
