"""Core business logic layer.

Subpackages:
- matching: ingredient name normalization, units, pantry matching
- planning: recipe scoring, slot expansion, selection and the generation engine
- reporting: coverage, ingredient usage and warnings for a generated plan

The planner is pure: it takes a catalog snapshot and a configuration and
returns a proposed plan without persisting or rendering anything.
"""
__all__ = ["matching", "planning", "reporting"]
