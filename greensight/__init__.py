"""GreenSight — golf green measurement and Effective Green Diameter rating."""

__version__ = "0.1.0"
