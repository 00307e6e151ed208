"""Host backend adapters."""

from transient.window.factory import create_host
from transient.window.headless import HeadlessHost
from transient.window.surfaces import SurfaceLayout, SurfaceRegistry, TextSurface

__all__ = ["HeadlessHost", "SurfaceLayout", "SurfaceRegistry", "TextSurface", "create_host"]
