"""Default configuration values with environment variable placeholders."""
from typing import Any, Dict

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    # Logging configuration
    "logging": {
        "level": "${SHOWCASE_LOG_LEVEL:WARNING}",
        "destination": "${SHOWCASE_LOG_DESTINATION:stderr}",
        "file_path": "${SHOWCASE_LOG_FILE:logs/pattern_showcase.log}",
        "max_size_mb": 10,
        "backup_count": 3,
    },
    "demo_order": ["observer", "strategy", "singleton", "factory", "adapter", "decorator"],
}
