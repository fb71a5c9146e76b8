"""Authentication for clone operations: HTTPS basic auth or SSH keys."""

import logging
import os
import shlex
from pathlib import Path
from typing import Dict, Optional, Tuple
from urllib.parse import quote, urlsplit, urlunsplit

from ..config.settings import Settings
from ..exceptions import SSHAuthError
from ..models import CloneTarget


def _strip_userinfo(netloc: str) -> str:
    return netloc.rsplit("@", 1)[-1]


def build_authenticated_url(url: str, credentials: Optional[Tuple[str, str]]) -> str:
    """Embed basic auth credentials in an HTTP(S) URL."""
    if not credentials:
        return url
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https"):
        return url
    username, password = credentials
    userinfo = f"{quote(username, safe='')}:{quote(password, safe='')}"
    netloc = f"{userinfo}@{_strip_userinfo(parts.netloc)}"
    return urlunsplit(parts._replace(netloc=netloc))


def redact_url(url: str) -> str:
    """Hide any password embedded in a URL before it is logged."""
    parts = urlsplit(url)
    if parts.password is None:
        return url
    netloc = f"{parts.username}:***@{_strip_userinfo(parts.netloc)}"
    return urlunsplit(parts._replace(netloc=netloc))


def build_ssh_environment(key_file: Path, known_hosts_file: Path) -> Dict[str, str]:
    """
    Build the environment GitPython passes to git for SSH clones.

    Raises:
        SSHAuthError: If the private key or known_hosts file is missing or unreadable
    """
    required = (("SSH private key", key_file), ("known_hosts file", known_hosts_file))
    for label, path in required:
        if not path.is_file() or not os.access(path, os.R_OK):
            raise SSHAuthError(
                f"Failed to load {label}: {path} is missing or unreadable"
            )

    command = " ".join(
        [
            "ssh",
            "-i",
            shlex.quote(str(key_file)),
            "-o",
            f"UserKnownHostsFile={shlex.quote(str(known_hosts_file))}",
            "-o",
            "StrictHostKeyChecking=yes",
            "-o",
            "IdentitiesOnly=yes",
        ]
    )
    return {"GIT_SSH_COMMAND": command}


class CloneAuthenticator:
    """Selects HTTPS or SSH authentication for a clone target."""

    def __init__(
        self,
        http_credentials: Optional[Tuple[str, str]] = None,
        ssh_key_file: Optional[Path] = None,
        ssh_known_hosts_file: Optional[Path] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.http_credentials = http_credentials
        self.ssh_key_file = ssh_key_file or Path.home() / ".ssh" / "id_rsa"
        self.ssh_known_hosts_file = (
            ssh_known_hosts_file or Path.home() / ".ssh" / "known_hosts"
        )
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_settings(
        cls, settings: Settings, logger: Optional[logging.Logger] = None
    ) -> "CloneAuthenticator":
        return cls(
            http_credentials=settings.http_credentials,
            ssh_key_file=settings.ssh_key_file,
            ssh_known_hosts_file=settings.ssh_known_hosts_file,
            logger=logger,
        )

    def prepare(self, target: CloneTarget) -> Tuple[str, Dict[str, str]]:
        """Return the URL to clone and extra environment for git."""
        if target.use_ssh:
            env = build_ssh_environment(self.ssh_key_file, self.ssh_known_hosts_file)
            self.logger.debug(
                "Using SSH authentication", extra={"key_file": str(self.ssh_key_file)}
            )
            return target.clone_url, env

        if self.http_credentials is None:
            self.logger.debug("No HTTP credentials configured, cloning unauthenticated")
            return target.clone_url, {}

        self.logger.debug("Using HTTP basic authentication")
        return build_authenticated_url(target.clone_url, self.http_credentials), {}
