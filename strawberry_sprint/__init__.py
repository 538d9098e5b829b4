"""
strawberry_sprint
-----------------
A kitty chases the pointer around a fixed stage and eats strawberries.

Run with ``python -m strawberry_sprint``.
"""

__version__ = "0.1.0"
