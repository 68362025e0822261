"""Webhook delivery resource.

Usage
-----
Import the resource for sink registration::

    from sponsorhook.api.webhook.resources import SponsorWebhookResource
"""
