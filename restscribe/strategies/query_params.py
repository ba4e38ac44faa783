"""
Query parameters from a form request's rules and its ``query_parameters()`` method.
"""

from ..form_request import ProvidesQueryParameters
from .form_request import GetFromFormRequestBase


class GetFromQueryParamsFormRequest(GetFromFormRequestBase):
    custom_parameter_data_method_name = "query_parameters"
    custom_parameter_data_capability = ProvidesQueryParameters
