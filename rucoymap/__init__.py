"""Readers for old Rucoy Online map, tile and texture files, and a PNG map renderer."""

__version__ = "0.1.0"