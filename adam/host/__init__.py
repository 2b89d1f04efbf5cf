"""Host graphics library adapters."""
