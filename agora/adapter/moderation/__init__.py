"""Toxicity scorer adapter."""

from .client import HttpToxicityClient, MockToxicityClient

__all__ = ["HttpToxicityClient", "MockToxicityClient"]
