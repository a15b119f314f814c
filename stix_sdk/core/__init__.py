"""Offer core classes & functions."""
