"""Error taxonomy shared by the catalog, planner and shopping list layers.

ValidationError -> malformed meal or ingredient input, nothing was written
NotFoundError   -> lookup by identifier failed
StorageError    -> the database (or the shopping list file) could not be read or written
LogicError      -> a caller tried to plan a meal that does not resolve
"""


class MealPlannerError(Exception):
    """Base class for every error raised by the meal planner."""


class ValidationError(MealPlannerError, ValueError):
    pass


class NotFoundError(MealPlannerError, LookupError):
    pass


class StorageError(MealPlannerError):
    pass


class LogicError(MealPlannerError):
    pass


__all__ = ['MealPlannerError', 'ValidationError', 'NotFoundError', 'StorageError', 'LogicError']
