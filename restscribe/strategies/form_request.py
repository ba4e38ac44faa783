"""
Parameters documented through the form request a handler receives.
"""

import inspect
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Type

from ..bindings import get_method_parameters, make_route_resolver
from ..docblock import get_doc_blocks_from_route
from ..form_request import FormRequest, ProvidesValidator, ValidationFactory
from ..models import ExtractedEndpointData, Parameter
from ..rules import RuleSpec, get_parameters_from_validation_rules, normalise_array_and_object_parameters
from .base import Strategy
from .url_params import get_url_parameters_from_docblock

logger = logging.getLogger(__name__)


def find_form_request_class(handler: Callable) -> Optional[Type[FormRequest]]:
    """Return the first handler parameter type that is a form request."""
    for _, param_type in get_method_parameters(handler):
        if inspect.isclass(param_type) and issubclass(param_type, FormRequest):
            return param_type
    return None


class GetFromFormRequestBase(Strategy):
    """Reads validation rules and custom parameter data from a handler's form request.

    Subclasses name the method holding their custom data and the protocol a
    form request implements to provide it.
    """

    custom_parameter_data_method_name: str = ""
    custom_parameter_data_capability: Optional[type] = None

    def __call__(self, endpoint_data: ExtractedEndpointData) -> Optional[Dict[str, Parameter]]:
        return self.get_parameters_from_form_request(endpoint_data.handler, endpoint_data.route)

    def get_parameters_from_form_request(self, handler: Callable, route: Any = None) -> Dict[str, Parameter]:
        form_request_class = find_form_request_class(handler)
        if form_request_class is None:
            return {}

        if not self.is_form_request_meant_for_this_strategy(form_request_class):
            return {}

        resolution = self.container.build(form_request_class)
        if not resolution.ok:
            logger.warning(
                f"Skipping {form_request_class.__name__}: it could not be built ({resolution.error}). "
                f"Its parameters will not be documented."
            )
            return {}
        form_request: FormRequest = resolution.instance

        if route is not None:
            form_request.set_route_resolver(
                make_route_resolver(
                    route,
                    handler,
                    form_request,
                    docblock_loader=lambda: get_url_parameters_from_docblock(
                        get_doc_blocks_from_route(route)["method"].get_tags()
                    ),
                )
            )

        validation_rules = self.get_route_validation_rules(form_request)
        custom_parameter_data = self.get_custom_parameter_data(form_request)
        self._warn_about_missing_custom_data(validation_rules, custom_parameter_data)

        parameters = get_parameters_from_validation_rules(validation_rules, custom_parameter_data, self.generator)
        return normalise_array_and_object_parameters(parameters)

    def get_route_validation_rules(self, form_request: FormRequest) -> Mapping[str, RuleSpec]:
        if isinstance(form_request, ProvidesValidator):
            factory = self.container.build(ValidationFactory).unwrap()
            return form_request.validator(factory).get_rules()
        return form_request.rules()

    def get_custom_parameter_data(self, form_request: FormRequest) -> Dict[str, Mapping[str, Any]]:
        capability = self.custom_parameter_data_capability
        if capability is not None and isinstance(form_request, capability):
            return dict(getattr(form_request, self.custom_parameter_data_method_name)() or {})

        logger.warning(
            f"No {self.custom_parameter_data_method_name}() method found in {type(form_request).__name__}. "
            f"Only basic information can be extracted from the rules() method."
        )
        return {}

    def get_missing_custom_data_message(self, parameter_name: str) -> str:
        return (
            f"No data found for parameter '{parameter_name}' in your {self.custom_parameter_data_method_name}() method. "
            f"Add an entry for '{parameter_name}' so you can add a description and example."
        )

    def is_form_request_meant_for_this_strategy(self, form_request_class: type) -> bool:
        capability = self.custom_parameter_data_capability
        return capability is not None and issubclass(form_request_class, capability)

    def _warn_about_missing_custom_data(
        self, validation_rules: Mapping[str, RuleSpec], custom_parameter_data: Mapping[str, Any]
    ) -> None:
        if not custom_parameter_data or not self.config.warn_on_missing_custom_data:
            return
        for name in validation_rules:
            if name not in custom_parameter_data:
                logger.warning(self.get_missing_custom_data_message(name))
