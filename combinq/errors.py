class CombinqError(Exception):
    """base class for every error raised by combinq"""
    pass


class InvalidParameterError(CombinqError, ValueError):
    """raised when an enumerator is built with parameters outside its domain"""
    pass


class StaleViewError(CombinqError, RuntimeError):
    """raised when a view is read after its owner has advanced or been reset"""
    pass


class OneShotSourceError(CombinqError, TypeError):
    """raised when a source that can only be iterated once would need a second pass"""
    pass
