"""Order management core: domain, application, infrastructure and settings."""
