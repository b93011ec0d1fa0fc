"""raceglobe — proxy aggregator serving enriched race summaries."""

__version__ = "0.1.0"
