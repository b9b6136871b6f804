# Core components: config, logging
from .config import Settings, settings
from .logging_config import setup_logging
