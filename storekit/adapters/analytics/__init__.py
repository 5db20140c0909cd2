"""Analytics adapters for page view tracking.

Implementations:
- LoggingAnalyticsAdapter (writes page views to the application log)
"""
