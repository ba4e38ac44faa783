"""
Extraction strategies. Each strategy documents one kind of parameter for an endpoint.
"""

from .base import Strategy, load_strategy
from .body_params import GetFromBodyParamsFormRequest
from .form_request import GetFromFormRequestBase, find_form_request_class
from .query_params import GetFromQueryParamsFormRequest
from .url_params import GetFromUrlParamTag, GetFromUrlPath, get_url_parameters_from_docblock

__all__ = [
    "Strategy",
    "load_strategy",
    "GetFromFormRequestBase",
    "GetFromBodyParamsFormRequest",
    "GetFromQueryParamsFormRequest",
    "GetFromUrlParamTag",
    "GetFromUrlPath",
    "find_form_request_class",
    "get_url_parameters_from_docblock",
]
