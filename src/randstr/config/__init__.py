"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Environment variable seed referenced by ``random.seed_env``
"""

from .schema import ConfigModel, builder_from_config, load_config

__all__ = ["ConfigModel", "builder_from_config", "load_config"]
