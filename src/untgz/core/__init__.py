"""Decompression, archive sources and configuration."""
