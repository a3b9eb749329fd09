"""String, string-array, string-map, process and time utilities."""

__version__ = "0.1.0"
__all__ = ["process", "split", "string_array", "string_map", "strings", "timepoint"]