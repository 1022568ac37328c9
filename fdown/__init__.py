"""
fdown - archive images from saved Feedly entries.
"""

__version__ = '0.1.0'
