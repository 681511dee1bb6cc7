"""Core module - Settings, logging, and HTTP exceptions.

Import exceptions and logging helpers directly where needed:

    from concierge.core.exceptions import PlanGenerationFailedError
    from concierge.core.logging import configure_logging
"""

from concierge.core.config import settings

__all__ = [
    "settings",
]
