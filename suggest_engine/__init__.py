"""
Project idea suggestion engine
"""
__version__ = "1.0.0"
