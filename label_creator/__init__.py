"""Label creator: compliant food labels from reusable ingredient presets."""

__version__ = "0.1.0"
