"""
Shared-instance and logging helpers.
"""
