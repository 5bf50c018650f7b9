"""Generator configuration system with frozen, hashable, serializable dataclasses."""

from siteswap.config.generation import (
    MAX_ENCODABLE_HEIGHT,
    GeneratorConfig,
    GraphConfig,
    SearchConfig,
)
from siteswap.config.defaults import DEFAULT_CONFIG
from siteswap.config.hashing import config_hash, graph_config_hash
from siteswap.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "MAX_ENCODABLE_HEIGHT",
    "GeneratorConfig",
    "GraphConfig",
    "SearchConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "graph_config_hash",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
]
