"""Adapters - configuration, text rendering and the interactive terminal."""
