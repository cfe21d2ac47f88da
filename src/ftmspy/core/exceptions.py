"""ftmspy core exceptions."""


class ColumnNotFound(ValueError):
    """Exception raised when a column role is not defined or the column is missing from the metadata table."""


class InvalidArgument(ValueError):
    """Exception raised when a calculation receives data of the wrong kind or malformed parameters."""


class PipelineConfigurationError(ValueError):
    """Exception raised when an invalid configuration is set in a pipeline."""


class RegistryError(ValueError):
    """Exception raised when an entry is not found in a registry."""


class RepeatedIdError(ValueError):
    """Exception raised when trying to add a resource with an existing id."""
