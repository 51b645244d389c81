"""Typed reading and writing of package.json manifests."""

__version__ = "0.1.0"
__all__ = ["fields", "package_json"]