from .loan_period import LoanPeriod
from .loan_quantity import LoanQuantity

__all__ = [
    "LoanPeriod",
    "LoanQuantity",
]
