"""Networked side-scrolling platformer: game core, UDP networking, server and client."""

__version__ = "0.1.0"