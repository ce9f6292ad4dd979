"""Onion architecture example with a domain service that reaches outward."""
