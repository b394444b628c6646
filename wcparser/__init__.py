"""Parse WhatsApp chat exports into structured messages."""

__version__ = "0.1.1"