"""
Eccezioni specifiche del Domain Layer.
Rappresentano violazioni dei contratti sui dati dei record,
indipendenti dalla sorgente da cui i record provengono.
"""

class DomainError(Exception):
    """Eccezione base per tutti gli errori del Domain Layer."""
    pass


class InvalidTimestampError(DomainError, ValueError):
    """
    Sollevata quando un istante (es. `repository.pushed_at`) non è
    interpretabile. Non è uno scarto silenzioso: il record è presente
    ma il suo contenuto viola il formato atteso.
    """
    pass
