"""Day 1: Report Repair."""
