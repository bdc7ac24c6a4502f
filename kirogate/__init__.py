"""Conversion of OpenAI and Anthropic chat requests into Kiro API conversation payloads."""

__version__ = "0.1.0"