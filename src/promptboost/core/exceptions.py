"""Custom exceptions for the prompt enhancement service."""

from typing import Optional, Dict, Any, List


class PromptBoostError(Exception):
    """Base exception for all prompt enhancement errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class EnhancementError(PromptBoostError):
    """Error raised by an enhancement strategy."""

    def __init__(
        self,
        message: str,
        strategy: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.strategy = strategy
        if strategy:
            self.details["strategy"] = strategy


class UnknownStrategyError(EnhancementError):
    """Requested strategy name is not registered."""

    def __init__(self, name: str, available: Optional[List[str]] = None):
        super().__init__(
            f"Unknown enhancement strategy: {name}",
            details={"available": list(available or [])}
        )
        self.name = name


class MissingDomainError(EnhancementError):
    """Domain knowledge enhancement invoked without a domain."""

    def __init__(self, strategy: str = "domain-knowledge"):
        super().__init__(
            "Domain must be specified for domain knowledge enhancement",
            strategy=strategy
        )


class ValidationError(PromptBoostError):
    """Error validating caller input."""

    def __init__(
        self,
        message: str,
        validation_errors: Optional[list] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.validation_errors = validation_errors or []
        if validation_errors:
            self.details["validation_errors"] = validation_errors


class InvalidOptionsError(ValidationError):
    """Strategy options failed validation."""

    def __init__(
        self,
        strategy: str,
        validation_errors: Optional[list] = None,
        cause: Optional[Exception] = None
    ):
        fields = ", ".join(e.get("field", "?") for e in (validation_errors or []))
        super().__init__(
            f"Invalid options for strategy '{strategy}': {fields or 'unknown field'}",
            validation_errors=validation_errors,
            cause=cause
        )
        self.strategy = strategy


class InvalidRangeError(ValidationError):
    """Numeric depth or count outside its accepted range."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None
    ):
        super().__init__(message)
        self.field = field
        self.value = value
        if field:
            self.details["field"] = field
            self.details["value"] = value


class ConfigurationError(PromptBoostError):
    """Error in configuration."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.config_key = config_key
        if config_key:
            self.details["config_key"] = config_key


class ConfigLoadError(ConfigurationError):
    """Configuration file is unreadable or malformed."""

    def __init__(self, path: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Could not load configuration from {path}: {cause}",
            details={"path": path},
            cause=cause
        )
        self.path = path


class TemplateError(PromptBoostError):
    """Error in template processing."""

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.template_name = template_name
        if template_name:
            self.details["template_name"] = template_name
