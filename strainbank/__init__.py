"""REST API over PostgreSQL for growers, strains, harvest batches and terpene profiles."""

__version__ = "0.1.0"
