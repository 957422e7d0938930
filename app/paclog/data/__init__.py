"""Bundled data files for paclog."""
