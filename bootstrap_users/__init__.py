"""Bootstrap run: insert one user, read all users back."""

__version__ = "1.0.0"
