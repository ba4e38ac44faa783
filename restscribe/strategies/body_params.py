"""
Body parameters from a form request's rules and its ``body_parameters()`` method.
"""

from ..form_request import ProvidesBodyParameters, ProvidesQueryParameters
from .form_request import GetFromFormRequestBase


class GetFromBodyParamsFormRequest(GetFromFormRequestBase):
    custom_parameter_data_method_name = "body_parameters"
    custom_parameter_data_capability = ProvidesBodyParameters

    def is_form_request_meant_for_this_strategy(self, form_request_class: type) -> bool:
        # Rules describe the body unless the form request only documents query parameters
        if issubclass(form_request_class, ProvidesBodyParameters):
            return True
        return not issubclass(form_request_class, ProvidesQueryParameters)
