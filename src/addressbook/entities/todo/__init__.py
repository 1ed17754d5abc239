from .table import TodoTable

__all__ = ["TodoTable"]
