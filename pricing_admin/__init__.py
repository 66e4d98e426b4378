"""
Pricing admin console core
Marketplace cost model, custom field aggregation and category hierarchy
"""

__version__ = "1.0.0"
