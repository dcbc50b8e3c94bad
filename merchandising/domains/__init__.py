"""Domain packages for the analytics engine."""
