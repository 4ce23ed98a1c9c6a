"""Version Control System layer for svn-wrapper.

This module provides the working copy interface, the process boundary used
to run the external client, and the errors raised by both.
"""

from svn_wrapper.vcs.base import VCSManager
from svn_wrapper.vcs.exceptions import CommandFailedError, VCSError
from svn_wrapper.vcs.runner import CommandResult, CommandRunner, SubprocessRunner

__all__ = [
    "CommandFailedError",
    "CommandResult",
    "CommandRunner",
    "SubprocessRunner",
    "VCSError",
    "VCSManager",
]
