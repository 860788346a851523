"""Game logic for an airsoft bomb prop with a keypad, a screen and a horn."""

__version__ = "0.1.0"
__all__ = ["bomb", "chess", "display", "factory", "hardware"]