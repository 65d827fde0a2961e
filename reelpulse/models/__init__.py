"""
Data models for ReelPulse.
"""
