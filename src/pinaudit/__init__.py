"""pinaudit - Dependency pin auditing for Dart packages."""

__version__ = "0.3.0"
