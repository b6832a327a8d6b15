"""
Data layer for MarketMatch: models and repositories.
"""
