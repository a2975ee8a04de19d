"""doclineage - write-once document records with version lineage."""

__version__ = "0.1.0"
