# Switchyard CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Switchyard."""
import logging

logger = logging.getLogger("switchyard")
