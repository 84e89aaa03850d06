"""Serialization of prices for persistence and transport layers."""
