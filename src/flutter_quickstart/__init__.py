"""flutter-quickstart: scaffold Flutter projects with a clean architecture layout."""

__version__ = "0.1.0"
