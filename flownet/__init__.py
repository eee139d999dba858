"""flownet: graph edges with weight, capacity and flow."""

__version__ = "0.1.0"
