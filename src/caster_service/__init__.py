"""Caster Alexa skill service."""

__version__ = "0.1.0"
