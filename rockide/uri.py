"""File URIs for editor documents and lexical path containment."""

from __future__ import annotations

import os
import re
from urllib.parse import quote, unquote, urlsplit

FILE_SCHEME = "file"

# Characters a path may keep unescaped when written into a file URI.
_PATH_SAFE = "/$&+,:;=@"
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SLOW_PATH_CHARS = frozenset("%+:&?\x7f")


class URIError(ValueError):
    """Raised when a string is not a usable file URI."""


def _strict_unquote(text: str) -> str:
    match = _BAD_ESCAPE.search(text)
    if match:
        raise URIError(f"invalid URL escape {text[match.start():match.start() + 3]!r}")
    return unquote(text)


def _is_windows_drive_path(path: str) -> bool:
    return len(path) >= 3 and path[0].isalpha() and path[1] == ":"


def _is_windows_drive_uri_path(path: str) -> bool:
    return len(path) >= 4 and path[0] == "/" and path[1].isalpha() and path[2] == ":"


def _format_file_uri(path: str) -> str:
    return f"{FILE_SCHEME}://{quote(path, safe=_PATH_SAFE)}"


class DocumentURI(str):
    """The URI of a client editor document; empty or a file-scheme URI."""

    def _filename(self) -> str:
        if not self:
            return ""
        if self.startswith("file:///"):
            rest = self[len("file://"):]
            if not any(ch < " " or ch in _SLOW_PATH_CHARS for ch in rest):
                return rest
        parts = urlsplit(str(self), allow_fragments=False)
        if not parts.scheme and not self.startswith("/"):
            raise URIError(f"invalid URI for request: {str(self)!r}")
        if parts.scheme != FILE_SCHEME:
            raise URIError(
                f"only file URIs are supported, got {parts.scheme!r} from {str(self)!r}"
            )
        path = _strict_unquote(parts.path)
        if _is_windows_drive_uri_path(path):
            path = path[1].upper() + path[2:]
        return path

    def path(self) -> str:
        """Return the file system path this URI names."""
        return self._filename().replace("/", os.sep)

    def dir_path(self) -> str:
        """Return the path of the directory containing this URI's file."""
        return os.path.normpath(os.path.dirname(self.path()))

    def dir(self) -> DocumentURI:
        """Return the URI of the directory containing this URI's file."""
        return uri_from_path(self.dir_path())

    def encloses(self, file: DocumentURI | str) -> bool:
        """Report whether this URI's path is a segment-wise prefix of file's path."""
        return in_dir(self.path(), DocumentURI(file).path())


def parse_document_uri(s: str) -> DocumentURI:
    """Canonicalise a file URI as sent by a client."""
    if s == "":
        return DocumentURI("")
    if not s.startswith("file://"):
        raise URIError(f"DocumentURI scheme is not 'file': {s}")
    if not s.startswith("file:///"):
        s = "file:///" + s[len("file://"):]
    path = _strict_unquote(s[len("file://"):])
    if _is_windows_drive_uri_path(path):
        path = path[:1] + path[1].upper() + path[2:]
    return DocumentURI(_format_file_uri(path))


def uri_from_path(path: str) -> DocumentURI:
    """Return the file URI for a file system path; an empty path gives ''."""
    if path == "":
        return DocumentURI("")
    if not _is_windows_drive_path(path):
        path = os.path.abspath(path)
    if _is_windows_drive_path(path):
        path = "/" + path[0].upper() + path[1:]
    path = path.replace(os.sep, "/")
    return DocumentURI(_format_file_uri(path))


def clean_uri(uri: DocumentURI | str) -> DocumentURI:
    """Return the URI with its path lexically cleaned."""
    return uri_from_path(os.path.normpath(DocumentURI(uri).path()))


def in_dir(directory: str, path: str) -> bool:
    """Report whether path lies in the tree rooted at directory, lexically."""
    path_volume = os.path.splitdrive(path)[0]
    dir_volume = os.path.splitdrive(directory)[0]
    path = path[len(path_volume):]
    directory = directory[len(dir_volume):]
    sep = os.sep
    if path_volume.upper() != dir_volume.upper():
        return False
    if len(path) == len(directory):
        return path == directory
    if directory == "":
        return path != ""
    if len(path) > len(directory):
        if directory.endswith(sep):
            return path.startswith(directory)
        if path[len(directory)] == sep and path.startswith(directory):
            return len(path) == len(directory) + 1 or path[len(directory) + 1:] != ""
    return False