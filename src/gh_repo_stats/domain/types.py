from typing import Literal

Granularity = Literal["hourly", "daily"]
"""
Passo con cui una finestra temporale viene espansa in indirizzi d'archivio.

Valori possibili:
- hourly:
    Un indirizzo per ogni ora tra l'inizio e la fine della finestra (estremi inclusi).
    Corrisponde alla granularità naturale di GHArchive: copertura completa.
- daily:
    Un indirizzo per ogni giorno, mantenendo fissa l'ora dell'istante iniziale.
    Campionamento sparso (un'ora su ventiquattro) del comportamento storico.
"""

GRANULARITIES: tuple[str, ...] = ("hourly", "daily")
