"""Mars rover mission control: domain model, use cases and a WSGI JSON API."""

__version__ = "1.0.0"