"""Day 3: Toboggan Trajectory."""
