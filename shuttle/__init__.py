"""
shuttle - Interactive launcher for repository and job links
"""

__version__ = "0.3.0"
