"""
ReelPulse - movie review analytics.

Groups uploaded reviews by movie, computes rating statistics and keywords,
and picks genre-aware recommendations.
"""
