"""Infrastructure modules for the extraction tooling.

Centralized infrastructure components:
- configuration: Settings management (Settings, ExtractionFeatureSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- services: Application-scoped providers (get_settings)
"""
