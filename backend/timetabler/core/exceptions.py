class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

class ConfigurationError(AppError):
    """Raised when engine configuration is invalid and a run must not start."""
    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        super().__init__(message, status_code=status_code, details=details)

class GridConfigurationError(ConfigurationError):
    """Raised when working hours, session length or lunch window cannot form a week grid."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=400, details=details)
