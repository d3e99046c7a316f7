"""Extension layer — observer hooks via pluggy.

Plugins are found through the ``renamectl.plugins`` entry-point group.
"""

from renamectl.plugins.event_bus import EventBus
from renamectl.plugins.manager import PluginManager

__all__ = ["EventBus", "PluginManager"]
