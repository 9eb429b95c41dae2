from .batch import gather, submit_many
from .client import ThrottledClient

__all__ = [
    "ThrottledClient",
    "gather",
    "submit_many",
]
