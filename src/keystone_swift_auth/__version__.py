"""Version information for keystone-swift-auth."""

__version__ = "0.1.0"
