"""Day 5: Binary Boarding."""
