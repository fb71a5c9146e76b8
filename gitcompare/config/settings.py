from pathlib import Path
from typing import Optional, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_config import LOG_LEVELS


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values come from the process environment, with a `.env` file in the
    working directory read as a fallback. Credentials are optional: HTTPS
    clones run unauthenticated unless both GIT_USERNAME and GIT_PASSWORD
    are set.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    LOG_LEVEL: str = "info"

    # HTTPS basic auth
    GIT_USERNAME: str = ""
    GIT_PASSWORD: str = ""

    # SSH auth, defaulting to ~/.ssh/id_rsa and ~/.ssh/known_hosts
    SSH_KEY_PATH: str = ""
    SSH_KNOWN_HOSTS_PATH: str = ""

    @property
    def log_level_name(self) -> str:
        level = self.LOG_LEVEL.strip().lower()
        return level if level in LOG_LEVELS else "info"

    @property
    def http_credentials(self) -> Optional[Tuple[str, str]]:
        if not self.GIT_USERNAME or not self.GIT_PASSWORD:
            return None
        return self.GIT_USERNAME, self.GIT_PASSWORD

    @property
    def ssh_key_file(self) -> Path:
        if self.SSH_KEY_PATH:
            return Path(self.SSH_KEY_PATH).expanduser()
        return Path.home() / ".ssh" / "id_rsa"

    @property
    def ssh_known_hosts_file(self) -> Path:
        if self.SSH_KNOWN_HOSTS_PATH:
            return Path(self.SSH_KNOWN_HOSTS_PATH).expanduser()
        return Path.home() / ".ssh" / "known_hosts"
