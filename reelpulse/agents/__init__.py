"""
Agent implementations for ReelPulse.

Contains the modules that process reviews through the pipeline:
- CSV Ingestion Agent
- Keyword Extractor
- Review Aggregator (+ Genre Insights)
- Recommendation Selector
"""
