"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    Settings: Main settings class
    MaxMindSettings: Database discovery settings

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    log_level = settings.LOG_LEVEL
    install_root = settings.maxmind.MAXMIND_INSTALL_ROOT
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import MaxMindSettings

__all__ = ["Settings", "MaxMindSettings"]
