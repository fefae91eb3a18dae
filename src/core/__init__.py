"""
Core dimensional-unit algebra: value types, codec, and invariants.

This module contains the foundational building blocks that are independent
of any rendering or document layer.
"""
