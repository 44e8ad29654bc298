"""Order placement use case behind repository, payment and notification ports."""

__version__ = "0.1.0"
