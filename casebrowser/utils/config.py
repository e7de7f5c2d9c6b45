"""OmegaConf-based configuration loader for casebrowser."""

from pathlib import Path
from typing import Any
from importlib import resources as importlib_resources

from omegaconf import DictConfig, OmegaConf

_DEFAULT_CONFIG_RESOURCE_PACKAGE = "casebrowser.resources.configs"
_DEFAULT_CONFIG_RESOURCE_NAME = "default.yaml"


def _load_default_config() -> DictConfig:
    resource = importlib_resources.files(_DEFAULT_CONFIG_RESOURCE_PACKAGE).joinpath(_DEFAULT_CONFIG_RESOURCE_NAME)
    with importlib_resources.as_file(resource) as path:
        return OmegaConf.load(str(path))


def load_config(
    overrides: dict[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> DictConfig:
    """Load configuration from YAML with optional overrides.

    Priority (highest first):
        1. CLI / programmatic overrides
        2. Custom config_path YAML
        3. packaged resources/configs/default.yaml

    Args:
        overrides: Dict of dot-notation overrides (e.g. {"catalog.page_size": 50}).
        config_path: Path to a custom YAML config to merge on top of defaults.

    Returns:
        Merged OmegaConf DictConfig.
    """
    base = _load_default_config()

    if config_path is not None:
        custom = OmegaConf.load(str(config_path))
        base = OmegaConf.merge(base, custom)

    if overrides:
        override_conf = OmegaConf.from_dotlist([f"{key}={value}" for key, value in overrides.items()])
        base = OmegaConf.merge(base, override_conf)

    OmegaConf.resolve(base)
    return base
