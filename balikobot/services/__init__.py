"""Domain facade over the carrier gateway."""
