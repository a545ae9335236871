"""
pwgen - generate passwords matching declarative requirements.
"""

__version__ = "1.0.1"
