"""
Output generators.

Each generator is a pure function of a validated StbConfig (integrate.php
takes no input) and returns the file content as a string. Generators do not
read each other's output and can run in any order.
"""

from .integrate_php import generate_integrate_php
from .theme_json import build_theme_json, generate_theme_json
from .tokens_css import generate_tokens_css
from .tokens_wp_css import generate_tokens_wp_css

__all__ = [
    "generate_tokens_css",
    "generate_tokens_wp_css",
    "generate_theme_json",
    "build_theme_json",
    "generate_integrate_php",
]
