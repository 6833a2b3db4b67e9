from __future__ import annotations

import os
from dataclasses import dataclass, field

from leaseweb import LeasewebClient
from leaseweb.client import DEFAULT_BASE_URL
from leaseweb.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    RateLimitError,
    ServerError,
    WriteNotAllowedError,
)
from leaseweb.policies import Policies, WritePolicy

from .config import CLIConfig, load_config
from .errors import (
    EXIT_AUTH,
    EXIT_ERROR,
    EXIT_NOT_FOUND,
    EXIT_UNAVAILABLE,
    EXIT_USAGE,
    CLIError,
    usage_error,
)
from .formats import OutputFormat
from .logging import set_redaction_api_key
from .paths import CliPaths, get_paths

API_KEY_ENV = "LEASEWEB_API_KEY"
PROFILE_ENV = "LEASEWEB_PROFILE"
BASE_URL_ENV = "LEASEWEB_BASE_URL"

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass
class CLIContext:
    output: OutputFormat = "auto"
    transform: str | None = None
    quiet: bool = False
    verbosity: int = 0
    debug: bool = False
    profile: str | None = None
    api_key: str | None = None
    base_url: str | None = None
    timeout: float | None = None
    readonly: bool = False

    _paths: CliPaths = field(default_factory=get_paths)
    _loaded_config: CLIConfig | None = None
    _client: LeasewebClient | None = None

    @property
    def paths(self) -> CliPaths:
        return self._paths

    def load_config(self) -> CLIConfig:
        if self._loaded_config is None:
            self._loaded_config = load_config(self.paths.config_path)
        return self._loaded_config

    def effective_profile(self) -> str | None:
        return self.profile or os.getenv(PROFILE_ENV) or self.load_config().default_profile

    def resolve_api_key(self) -> str:
        if self.api_key and self.api_key.strip():
            return self.api_key.strip()

        env_key = os.getenv(API_KEY_ENV, "").strip()
        if env_key:
            return env_key

        profile = self.effective_profile()
        if profile is None:
            raise usage_error(
                "Missing API key. Use --api-key, set LEASEWEB_API_KEY, "
                "or select a profile (-p <profile>, LEASEWEB_PROFILE, 'lw config init')."
            )
        prof = self.load_config().profiles.get(profile)
        if prof is None or not prof.api_key.strip():
            raise usage_error(
                f'No API key found for profile "{profile}". '
                "Set LEASEWEB_API_KEY or run 'lw config init'."
            )
        return prof.api_key.strip()

    def resolve_base_url(self) -> str:
        return self.base_url or os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL

    def get_client(self) -> LeasewebClient:
        if self._client is not None:
            return self._client

        api_key = self.resolve_api_key()
        set_redaction_api_key(api_key)
        timeout = self.timeout if self.timeout is not None else DEFAULT_TIMEOUT_SECONDS
        if timeout <= 0:
            raise usage_error("--timeout must be > 0.")

        self._client = LeasewebClient(
            api_key=api_key,
            base_url=self.resolve_base_url(),
            timeout=timeout,
            policies=Policies(write=WritePolicy.DENY) if self.readonly else Policies(),
            log_requests=self.debug or self.verbosity >= 2,
        )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


def exit_code_for_exception(exc: Exception) -> int:
    if isinstance(exc, CLIError):
        return exc.exit_code
    if isinstance(exc, (AuthenticationError, AuthorizationError)):
        return EXIT_AUTH
    if isinstance(exc, NotFoundError):
        return EXIT_NOT_FOUND
    if isinstance(exc, (RateLimitError, ServerError)):
        return EXIT_UNAVAILABLE
    if isinstance(exc, WriteNotAllowedError):
        return EXIT_USAGE
    return EXIT_ERROR
