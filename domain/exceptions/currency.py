class CurrencyException(Exception):
    pass


class DecodeFailure(CurrencyException):
    pass

class TransportFailure(CurrencyException):
    pass
