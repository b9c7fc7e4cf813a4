"""Core business logic layer.

Subpackages:
- parsing: meal-plan markdown to ParsedPlan (text cleaning, line rules, parser)
"""
__all__ = ["parsing"]
