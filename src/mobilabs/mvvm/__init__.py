"""
MVVM helpers: observable properties and commands.
"""

from mobilabs.mvvm.command import Command, CommandBase, ParameterCommand
from mobilabs.mvvm.observable import ObservableObject

__all__ = [
    "Command",
    "CommandBase",
    "ParameterCommand",
    "ObservableObject",
]
