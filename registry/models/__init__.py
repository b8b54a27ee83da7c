from .citizen import Citizen

__all__ = ["Citizen"]
