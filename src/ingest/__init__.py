"""Knowledge-base row ingestion.

This package reads saved query results and assembles flattened rows
into reconciled format records with run summaries.
"""
