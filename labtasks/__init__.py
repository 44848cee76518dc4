"""Identifier-length and polynomial-derivative calculators, random input generators and self-check runners."""

__version__ = "0.1.0"