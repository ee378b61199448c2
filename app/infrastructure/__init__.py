"""Infrastructure modules for the portfolio i18n application.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings, PersistenceSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- events: Explicit notification channels (Event, EventChannel)
- persistence: Preference stores (PreferenceStore and implementations)
- i18n: Language detection, translation resolution and validation
"""
