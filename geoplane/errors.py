"""
Exceptions raised by the geo-plane mapper.
"""


class InvalidArgument(ValueError):
    """An input is outside the domain of the conversion."""
