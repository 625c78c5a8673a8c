"""gaugefiles: spec and concept file discovery for Gauge projects."""

__version__ = "0.1.0"
