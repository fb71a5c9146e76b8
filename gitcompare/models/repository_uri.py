"""Parsed repository URI shared by the host URL dialects."""

import re
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import SplitResult, parse_qs, urlsplit

from ..exceptions import InvalidURL, UnsupportedURI

SUPPORTED_SCHEMES = ("https", "http", "ssh")

# scp-like SSH syntax: git@host:path
_SCP_LIKE = re.compile(r"^(?P<user>[^@/:]+)@(?P<host>[^:/]+):(?P<path>.*)$")


def is_remote_uri(value: str) -> bool:
    """Check if a repository argument points at a remote rather than a local path."""
    value = value.strip()
    if value.startswith(("http://", "https://", "ssh://")):
        return True
    return "://" not in value and _SCP_LIKE.match(value) is not None


@dataclass(frozen=True)
class RepositoryURI:
    """A repository URI as given, plus its parsed parts."""

    raw: str
    parts: SplitResult

    @classmethod
    def parse(cls, uri: str) -> "RepositoryURI":
        value = uri.strip()
        if not value:
            raise InvalidURL("invalid URL: empty repository URI")

        match = _SCP_LIKE.match(value)
        if match and "://" not in value:
            value = f"ssh://{match['user']}@{match['host']}/{match['path'].lstrip('/')}"

        try:
            parts = urlsplit(value)
            parts.port  # raises ValueError on a malformed port
        except ValueError as e:
            raise InvalidURL(f"invalid URL {uri}: {e}") from e

        if parts.scheme not in SUPPORTED_SCHEMES:
            raise UnsupportedURI(f"Unsupported Git repository URI format: {uri}")
        if not parts.hostname:
            raise InvalidURL(f"invalid URL {uri}: missing host")

        return cls(raw=uri.strip(), parts=parts)

    @property
    def host(self) -> str:
        return self.parts.hostname or ""

    @property
    def use_ssh(self) -> bool:
        return self.parts.scheme == "ssh"

    @property
    def segments(self) -> List[str]:
        return [segment for segment in self.parts.path.split("/") if segment]

    def query_value(self, name: str) -> Optional[str]:
        values = parse_qs(self.parts.query).get(name)
        return values[0] if values else None
