"""
Core application components: configuration, logging, dependencies and lifecycle.
"""
