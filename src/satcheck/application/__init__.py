"""Application layer: filters, linters, services and reporters."""
