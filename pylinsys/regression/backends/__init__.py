"""
Least-squares backends.

    cpu_pinv: pseudo-inverse with Tikhonov fallback
"""

from pylinsys.regression.backends.pinv import PseudoInverseBackend

__all__ = [
    "PseudoInverseBackend",
]
