"""
facebox - HTTP face detection service
"""

__version__ = "1.0.0"
