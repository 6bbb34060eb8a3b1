class RepoStatsError(Exception):
    """Eccezione base per tutti gli errori della pipeline di classifica."""
    pass

class ConfigError(RepoStatsError, ValueError):
    """Parametri di esecuzione non validi: la pipeline non viene avviata."""
    pass

class DataSourceError(RepoStatsError):
    """
    Errore nel recupero o nella lettura di un archivio.
    Qualsiasi DataSourceError interrompe l'intera esecuzione.
    """
    pass

class FetchError(DataSourceError):
    pass

class DecompressError(DataSourceError):
    pass

class ParseError(DataSourceError):
    pass
