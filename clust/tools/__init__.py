"""Parameter and return types and input schemas derived from documented Python functions."""

__all__ = ["parameter_type", "return_type", "schema"]