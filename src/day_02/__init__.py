"""Day 2: Password Philosophy."""
