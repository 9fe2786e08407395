"""Domain exceptions."""


class ConfigurationError(Exception):
    """Raised when region weather data is authored incorrectly.

    Covers empty season tables, impacts referencing unknown conditions and
    configuration sources that cannot be read or parsed. Never retried.
    """

    pass


class RegionNotFoundError(LookupError):
    """Raised when a region identifier is not present in the configuration."""

    def __init__(self, region_id: str):
        super().__init__(f"Region '{region_id}' not found in configuration")
        self.region_id = region_id
