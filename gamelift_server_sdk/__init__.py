"""Data model, errors and validation for Amazon GameLift Servers game server processes."""

__version__ = "5.0.0"

__all__ = [
    "attribute_value",
    "enums",
    "errors",
    "matchmaker_data",
    "messages",
    "requests",
    "results",
    "sessions",
    "validation",
]