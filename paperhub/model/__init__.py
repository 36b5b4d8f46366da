from .author import AuthorInput, AuthorQuery
from .paper import PaperInput, PaperQuery

__all__ = [
    "AuthorInput",
    "AuthorQuery",
    "PaperInput",
    "PaperQuery",
]
