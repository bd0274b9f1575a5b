"""Utility modules for git service detection."""
