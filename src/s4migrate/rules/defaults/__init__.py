"""Packaged rule catalog."""
