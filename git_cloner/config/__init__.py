from .loader import CONFIG_FILENAME, DEFAULT_CONFIG_TEMPLATE, load_config
from .models import (
    ClonerConfig,
    OutputConfig,
    SyncConfig,
    VCSConfig,
)

__all__ = [
    "CONFIG_FILENAME",
    "ClonerConfig",
    "DEFAULT_CONFIG_TEMPLATE",
    "OutputConfig",
    "SyncConfig",
    "VCSConfig",
    "load_config",
]
