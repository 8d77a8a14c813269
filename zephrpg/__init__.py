"""Simulated VGA, PS/2, UART and timer machine with game data models, a HUD and a battle screen."""

__version__ = "1.0.0"