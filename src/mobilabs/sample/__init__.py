"""
Sample application built on the MobiLabs device and MVVM layers.
"""

from mobilabs.sample.view_model import MainViewModel

__all__ = [
    "MainViewModel",
]
