"""Scoring, analytics and gamification engines for mock-interview practice."""

__version__ = "2.0.0"
