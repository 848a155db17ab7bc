"""
BestChoice Core Library.

Configuration, constants and logging shared by the schema layer.

Usage:
    # Config
    from core.config import get_settings, Settings

    # Logging
    from core.logging import get_logger, configure_logging
"""

__version__ = "1.0.0"

# Import directly from submodules:
#   from core.config import get_settings
#   from core.logging import get_logger
