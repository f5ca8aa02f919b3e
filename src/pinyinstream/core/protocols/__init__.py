from .lookup import RomanizationLookupProtocol

__all__ = ["RomanizationLookupProtocol"]
