"""Transient display manager: show generated content, page it, restore the layout."""

from transient.api.config import NEVER, TransientConfig
from transient.api.transient import TransientDisplay, create_transient_display

__version__ = "0.1.0"

__all__ = ["NEVER", "TransientConfig", "TransientDisplay", "create_transient_display", "__version__"]
