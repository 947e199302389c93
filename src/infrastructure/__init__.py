"""Infrastructure Layer.

Adapters that implement domain ports on top of third-party libraries.
"""
