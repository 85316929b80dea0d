"""Session detection, chooser discovery and selection."""

from chooser.system.detector import SessionDetector, SessionInfo
from chooser.system.registry import ChooserRegistry
from chooser.system.selector import ChooserSelector

__all__ = ["SessionDetector", "SessionInfo", "ChooserRegistry", "ChooserSelector"]
