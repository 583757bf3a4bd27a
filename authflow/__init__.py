"""Form validation and submission state for the login, forgot-password and reset-password flows."""

__version__ = "1.0.0"
