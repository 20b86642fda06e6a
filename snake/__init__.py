# snake/__init__.py
"""Terminal Snake: a character-grid snake game with a polled keyboard."""
__version__ = "0.1.0"
