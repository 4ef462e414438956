"""Command-line interface for lanedesk."""
