"""CSV Fixtures — bulk payment-file test data generator."""

__version__ = "0.1.0"
