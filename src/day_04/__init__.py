"""Day 4: Passport Processing."""
