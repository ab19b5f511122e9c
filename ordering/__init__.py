"""Order management core: domain, application, data and settings layers."""

__version__ = "1.0.0"
