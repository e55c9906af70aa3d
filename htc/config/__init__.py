from .load import CONFIG_FILE, ConfigError, load_build_config, load_template_data, parse_overrides
from .model import BuildConfig, TemplateData

__all__ = [
    "BuildConfig",
    "TemplateData",
    "CONFIG_FILE",
    "ConfigError",
    "load_build_config",
    "load_template_data",
    "parse_overrides",
]
