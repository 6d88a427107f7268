"""
Infrastructure layer - Frameworks and drivers.

Configuration and the storage adapters implementing the application ports.
"""
