"""Travel Concierge - conversational travel planning backend."""

__version__ = "0.1.0"
