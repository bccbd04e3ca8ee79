from .normalize import coerce_pair, coerce_series, is_integer_series

__all__ = ["coerce_pair", "coerce_series", "is_integer_series"]
