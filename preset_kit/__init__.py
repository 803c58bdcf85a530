"""
preset-kit: turns authoring-tool presets into clean instruction text and
assembles state-gated auxiliary rules.
"""

__version__ = "0.1.0"
