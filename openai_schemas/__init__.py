"""
OpenAI Schemas: Wire models for run tool outputs and moderation reports

Typed request/response models for an OpenAI-style REST client. The package
covers two payloads: the tool-output submission sent to a paused run, and
the report returned by the moderation endpoint.

The package only emits log records. Applications set up output once at
startup, for example:

    from openai_schemas.config import configure_logging, get_settings

    configure_logging(get_settings())
"""

__version__ = "0.1.0"
