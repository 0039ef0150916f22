"""Booking pricing and date-range selection core for a pet boarding app."""

__version__ = "0.1.0"
