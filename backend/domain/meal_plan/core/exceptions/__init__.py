"""Domain exceptions for the Meal Plan bounded context."""

from domain.meal_plan.core.exceptions.domain_errors import (
    InvalidMealPlanError,
    InvalidMealTypeError,
    MealPlanAccessDeniedError,
    MealPlanDomainError,
    MealPlanNotFoundError,
    MealPlanPersistenceError,
    MealPlanValidationError,
)

__all__ = [
    "MealPlanDomainError",
    "MealPlanValidationError",
    "InvalidMealTypeError",
    "InvalidMealPlanError",
    "MealPlanNotFoundError",
    "MealPlanAccessDeniedError",
    "MealPlanPersistenceError",
]
