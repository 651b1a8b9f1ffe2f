"""
Infrastructure layer: stores and security primitives.
"""
