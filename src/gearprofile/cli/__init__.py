"""Command-line entry points for gearprofile."""
