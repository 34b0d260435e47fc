"""Kinds of filesystem entries reported by probes and directory listings."""

from enum import Enum


class FileType(Enum):
    """Kind of an existing filesystem entry."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"  # sockets, devices, fifos
