"""Sponsorhook: relay GitHub sponsorship webhooks to a Discord channel."""

__version__ = "0.1.0"
