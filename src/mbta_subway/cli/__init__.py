"""Command-line interface for mbta-subway."""
