from app.core.models.key_value import KeyValueEntry

__all__ = [
    "KeyValueEntry",
]
