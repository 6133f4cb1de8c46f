"""Classic algorithms on arrays, recursion, graphs and trees."""

__version__ = "0.1.0"