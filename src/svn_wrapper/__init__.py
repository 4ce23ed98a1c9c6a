"""svn-wrapper: a thin Python layer over the Subversion command-line client."""

__version__ = "0.1.0"
