"""
Founder Pulse

Founder assessment scoring, archetype classification, co-founder
compatibility, peer matching and burnout tracking.
"""

__version__ = "1.0.0"
