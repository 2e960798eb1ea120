"""Utility helpers for graphadt."""
