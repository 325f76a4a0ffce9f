"""
Sidereal (Vedic) birth chart engine.
"""
