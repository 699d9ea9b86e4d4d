"""Core building blocks shared by every kf operation."""
