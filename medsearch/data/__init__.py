"""Bundled medication datasets."""
