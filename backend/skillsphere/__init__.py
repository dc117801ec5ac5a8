"""
Skill Sphere backend: user registration/login and the course catalogue.
"""

__version__ = "1.0.0"
