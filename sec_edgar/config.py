"""Runtime configuration for requests sent to SEC EDGAR."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from sec_edgar.errors import ConfigError

USER_AGENT_ENV_VAR = "SEC_USER_AGENT"
TIMEOUT_ENV_VAR = "SEC_TIMEOUT"


class EdgarConfig(BaseModel):
    """
    Settings shared by every component that talks to EDGAR.

    The SEC asks that every request identify its sender, so ``user_agent``
    should look like ``"Sample Company Name admin@sample.com"``. It is left
    optional here so a config can be built before the value is known; the
    request helpers raise ConfigError if it is still missing at request time.
    """

    model_config = ConfigDict(frozen=True)

    user_agent: str | None = None
    timeout: float = 30.0
    follow_redirects: bool = True

    @classmethod
    def from_env(cls, env_file: Path | str | None = None) -> "EdgarConfig":
        """
        Build a config from environment variables.

        Args:
            env_file: Optional path to a .env file loaded before reading the
                environment. Existing variables are not overridden.

        Returns:
            EdgarConfig populated from SEC_USER_AGENT and SEC_TIMEOUT
        """
        load_dotenv(dotenv_path=env_file)

        values: dict[str, object] = {"user_agent": os.environ.get(USER_AGENT_ENV_VAR)}
        timeout = os.environ.get(TIMEOUT_ENV_VAR)
        if timeout:
            try:
                values["timeout"] = float(timeout)
            except ValueError as e:
                raise ConfigError(f"{TIMEOUT_ENV_VAR} must be a number, got '{timeout}'") from e

        return cls(**values)
