"""Command-line host: settings -> logging -> Runner -> list/run."""
