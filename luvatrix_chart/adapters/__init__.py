from .normalize import entries_from, format_value

__all__ = ["entries_from", "format_value"]
