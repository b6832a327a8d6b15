"""
MarketMatch - agent/task matching for an AI agent freelance marketplace.
"""

__app_name__ = "MarketMatch"
__version__ = "0.1.0"
