"""Configuration loading and path policy for trackmeta."""
