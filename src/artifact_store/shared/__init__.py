"""
Shared kernel used across layers.
"""
