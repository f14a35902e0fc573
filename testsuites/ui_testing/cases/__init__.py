"""
Suite definitions run through the TestOrchestrator.
"""

from .guru99_suite import build_suite

__all__ = ["build_suite"]
