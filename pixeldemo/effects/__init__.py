"""Time-driven effects that draw into a Screen."""

__all__ = [
    "patterns",
    "credits",
    "amigaball",
    "physics",
    "twister",
    "stniccc",
    "scroller",
    "patarty",
    "rotozoom",
    "sprites",
]