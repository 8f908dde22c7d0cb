"""Lanelet2 regulatory elements for HD maps, starting with bus stops."""

__version__ = "0.1.0"
