"""
Password generation engine.

Resolves declarative requirements into a generation plan and produces
random or pronounceable passwords that satisfy it.
"""

from .charset import CharacterSet
from .config import Configuration, Style, DEFAULT_CONFIG
from .password_generator import PasswordGenerator, generate_password
from .resolver import GenerationPlan, resolve

__all__ = [
    'CharacterSet',
    'Configuration',
    'Style',
    'DEFAULT_CONFIG',
    'GenerationPlan',
    'PasswordGenerator',
    'generate_password',
    'resolve',
]
