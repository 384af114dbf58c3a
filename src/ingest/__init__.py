"""ULS source ingestion.

This package reads and parses the AM, CO, EN and HD .dat files and
drives one merge run over them.
"""
