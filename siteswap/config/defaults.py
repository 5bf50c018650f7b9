"""Default configuration — single source of truth for default generator parameters."""

from siteswap.config.generation import GeneratorConfig

# All-default values: balls=3, max_height=5, periods 1..3.
DEFAULT_CONFIG = GeneratorConfig()
