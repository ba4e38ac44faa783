"""
Base class for extraction strategies.
"""

import importlib
from typing import Dict, Optional, Type

from ..config import ScribeConfig
from ..container import Container
from ..examples import ExampleGenerator
from ..models import ExtractedEndpointData, Parameter


class Strategy:
    """Documents one kind of parameter for an endpoint.

    Strategies are called once per endpoint and return a mapping of
    parameter name to :class:`Parameter`, or ``None`` when they have
    nothing to say about the endpoint.
    """

    def __init__(
        self,
        config: Optional[ScribeConfig] = None,
        container: Optional[Container] = None,
        generator: Optional[ExampleGenerator] = None,
    ):
        self.config = config or ScribeConfig()
        self.container = container or Container()
        self.generator = generator or ExampleGenerator(self.config.example_seed)

    def __call__(self, endpoint_data: ExtractedEndpointData) -> Optional[Dict[str, Parameter]]:
        raise NotImplementedError


def load_strategy(path: str) -> Type[Strategy]:
    """Import a strategy class from a dotted path such as ``package.module.ClassName``."""
    module_name, _, class_name = path.rpartition(".")
    if not module_name:
        raise ValueError(f"Strategy path must be a dotted path, got '{path}'")
    module = importlib.import_module(module_name)
    strategy_class = getattr(module, class_name, None)
    if not (isinstance(strategy_class, type) and issubclass(strategy_class, Strategy)):
        raise ValueError(f"'{path}' is not a Strategy subclass")
    return strategy_class
