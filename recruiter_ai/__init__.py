"""RecruiterAI local persistence and query layer."""
__version__ = "0.1.0"
