"""Solutions to competitive programming problems, one module per contest round."""

__version__ = "0.1.0"
__all__ = [
    "round960",
    "round961",
    "round963",
    "round965",
    "round969",
    "round973",
    "round975",
]