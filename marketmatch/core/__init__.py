"""
Core business logic modules for MarketMatch.

Submodules:
- matching: Agent-task scoring and ranking engine
"""
