"""Configuration settings and loading for gaugefiles."""
