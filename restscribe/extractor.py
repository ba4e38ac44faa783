"""
Runs the configured strategies over every route of a router.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .config import ScribeConfig
from .container import Container
from .examples import ExampleGenerator
from .models import STAGES, ExtractedEndpointData, Parameter
from .router import Route, Router
from .strategies.base import Strategy, load_strategy

# Set up logger for this module
logger = logging.getLogger(__name__)


class Extractor:
    """Extracts documentation for routes, one route at a time.

    Extraction is best effort: an exception raised while documenting a
    route is logged and recorded on that route's endpoint data, and the
    remaining routes are still processed.
    """

    def __init__(self, config: Optional[ScribeConfig] = None, container: Optional[Container] = None):
        self.config = config or ScribeConfig()
        self.container = container or Container()
        self.generator = ExampleGenerator(self.config.example_seed)
        self._strategies: Dict[str, List[Strategy]] = {
            stage: [self._instantiate(path) for path in self.config.strategies.get(stage, [])]
            for stage in STAGES
        }

    def _instantiate(self, path: str) -> Strategy:
        return load_strategy(path)(self.config, self.container, self.generator)

    def strategies_for(self, stage: str) -> List[Strategy]:
        return list(self._strategies.get(stage, []))

    def extract(self, routes: Iterable[Route]) -> List[ExtractedEndpointData]:
        return [self.process_route(route) for route in routes]

    def extract_router(self, router: Router) -> List[ExtractedEndpointData]:
        return self.extract(router.routes())

    def process_route(self, route: Route) -> ExtractedEndpointData:
        self.container.flush_request_scope()
        route.parameters.clear()
        endpoint_data = ExtractedEndpointData.from_route(route)

        for stage in STAGES:
            try:
                self._run_stage(stage, endpoint_data)
            except Exception as e:
                logger.error(f"Failed to extract {stage} for {route.method.value} {route.path}: {e}")
                endpoint_data.extraction_errors.append(f"{stage}: {e}")
        return endpoint_data

    def _run_stage(self, stage: str, endpoint_data: ExtractedEndpointData) -> None:
        collected: Dict[str, Parameter] = endpoint_data.get_parameters(stage)
        for strategy in self._strategies.get(stage, []):
            logger.debug(f"Running {type(strategy).__name__} for {endpoint_data.http_method.value} {endpoint_data.uri}")
            results = strategy(endpoint_data)
            if not results:
                continue
            for name, parameter in results.items():
                collected[name] = collected[name].merged_with(parameter) if name in collected else parameter
