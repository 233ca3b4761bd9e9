"""Feature packages for trackmeta."""
