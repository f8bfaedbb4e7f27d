# log_scout/__init__.py
"""
LogScout package initializer.
Recursively searches object-store directory listings for log files containing a text pattern.
"""
__version__ = "0.1.0"
