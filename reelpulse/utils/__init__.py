"""
Utility modules for ReelPulse.

Cross-cutting concerns:
- Storage: JSON-backed preference store
"""
