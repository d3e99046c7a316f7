"""renamectl — rename sessions for named item collections."""

__version__ = "0.1.0"
