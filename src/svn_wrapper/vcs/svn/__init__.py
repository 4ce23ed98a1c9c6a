"""Subversion implementation for svn-wrapper."""

from svn_wrapper.vcs.svn.manager import SvnManager
from svn_wrapper.vcs.svn.parsers import InfoParser, StatusParser, TextInfoParser, TextStatusParser

__all__ = [
    "InfoParser",
    "StatusParser",
    "SvnManager",
    "TextInfoParser",
    "TextStatusParser",
]
