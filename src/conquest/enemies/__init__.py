from .models import Enemy

__all__ = ["Enemy"]
