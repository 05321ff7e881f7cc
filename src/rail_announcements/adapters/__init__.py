"""Adapters - configuration, clip storage and audio output."""
