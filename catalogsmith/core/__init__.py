"""catalogsmith core — fingerprinting, deduplication, staging and the synthesis session."""
