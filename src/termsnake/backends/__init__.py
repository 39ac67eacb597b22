# __init__.py
"""Concrete Renderer / InputSource pairs.

The pygame and curses backends are imported lazily by the CLI so the
engine stays usable without a display or a tty.
"""

from .headless import BufferRenderer, ScriptedInput

__all__ = ["BufferRenderer", "ScriptedInput"]
