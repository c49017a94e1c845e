from .alphavantage import AlphaVantageProvider
from .base import RateProvider

__all__ = ['AlphaVantageProvider', 'RateProvider']
