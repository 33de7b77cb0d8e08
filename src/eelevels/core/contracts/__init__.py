"""
Contract Validation Module

Модуль для валидации JSON контрактов величин eelevels.
"""

from .validators import (
    ContractValidator,
    QuantityValidator,
    SchemaLoader,
    quantity_from_contract,
    validate_quantity,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "QuantityValidator",
    # Functions
    "validate_quantity",
    "quantity_from_contract",
]
