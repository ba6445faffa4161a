"""Infrastructure modules for mmdb-bridge.

Centralized infrastructure components:
- configuration: Settings management (Settings, MaxMindSettings)
- clients: MaxMind DB handle discovery and per-context state
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results and error classification
- services: Providers (get_settings, create_database_context)
"""
