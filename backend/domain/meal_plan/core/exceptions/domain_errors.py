"""Domain exceptions for the Meal Plan bounded context.

This module defines the exception hierarchy for meal plan domain errors.
All domain exceptions inherit from MealPlanDomainError so the delivery
layers (REST, GraphQL) can translate them into status codes in one place.
"""


class MealPlanDomainError(Exception):
    """Base exception for meal plan domain.

    All domain-specific exceptions should inherit from this class.
    """

    pass


class MealPlanValidationError(MealPlanDomainError):
    """Raised when view query parameters are missing or malformed.

    Examples:
    - viewMode=day without filterDate
    - filterMonth outside 1..12
    - filterStartDate after filterEndDate
    """

    pass


class InvalidMealTypeError(MealPlanValidationError):
    """Raised when a meal type is not one of the supported values."""

    pass


class InvalidMealPlanError(MealPlanDomainError):
    """Raised when meal plan invariants are violated.

    Examples:
    - start_date after end_date
    """

    pass


class MealPlanNotFoundError(MealPlanDomainError):
    """Raised when a meal plan does not exist.

    Identifiers that cannot be parsed as integers are reported with this
    error as well, so a malformed id and a missing plan look the same to
    the caller.
    """

    pass


class MealPlanAccessDeniedError(MealPlanDomainError):
    """Raised when a meal plan exists but belongs to another user."""

    pass


class MealPlanPersistenceError(MealPlanDomainError):
    """Raised when the storage backend fails in an unexpected way.

    Not retried by the domain; the message is not meant for end users.
    """

    pass
