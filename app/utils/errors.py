"""Custom exceptions for the dashboard shell."""


class ScoutPredictError(Exception):
    """Base exception for all application errors."""
    pass


class ConfigurationError(ScoutPredictError):
    """Missing or invalid configuration."""
    pass


class DataSourceError(ScoutPredictError):
    """Error loading fixtures from a data source."""
    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source}: {message}")


class ValidationError(ScoutPredictError):
    """Team statistics failed validation."""
    pass
