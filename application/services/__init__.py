from .rate_service import DEFAULT_SYMBOLS, RateService

__all__ = ['DEFAULT_SYMBOLS', 'RateService']
