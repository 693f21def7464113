"""Marketplace API package.

Holds the domain entities, the use cases behind each HTTP endpoint, the
persistence and provider adapters, and the FastAPI interface layer.
``app.application.polling.PollingTask`` refreshes client-side data such as
notification counts on an interval.
"""
