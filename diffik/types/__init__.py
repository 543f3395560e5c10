from .ik import IKResult, IKStatus

__all__ = [
    "IKResult",
    "IKStatus",
]
