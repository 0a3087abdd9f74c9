from .book_language import BookLanguage
from .book_quantity import BookQuantity
from .book_title import BookTitle
from .book_type import BookType

__all__ = [
    "BookLanguage",
    "BookQuantity",
    "BookTitle",
    "BookType",
]
