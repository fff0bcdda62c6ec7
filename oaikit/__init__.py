"""Typed models for realtime events, runs, threads and users, with file-upload helpers."""

__version__ = "0.1.0"