"""The gitlocal provider: opens the repository and hands it to data sources."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from .datasources import (
    CommitDataSource,
    DataSource,
    HeadDataSource,
    RemoteDataSource,
    RemotesDataSource,
)
from .diagnostics import Diagnostics
from .errors import RepositoryOpenError
from .schema import Schema, string_attribute
from .values import is_null, is_unknown
from .vcs.git_adapter import GitRepository, open_repository

logger = logging.getLogger(__name__)

PROVIDER_TYPE_NAME = "gitlocal"
ENV_PATH = "GIT_LOCAL_PATH"


@dataclass
class ConfigureResponse:
    """Result of configuring the provider."""
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    data_source_data: Optional[GitRepository] = None


class GitLocalProvider:
    """Provider exposing read-only views of one local git repository."""

    def __init__(self, version: str = "dev"):
        # "dev" for local builds, "test" under the test suite, the release version otherwise.
        self.version = version

    def metadata(self) -> Dict[str, str]:
        return {"type_name": PROVIDER_TYPE_NAME, "version": self.version}

    def schema(self) -> Schema:
        return Schema(
            attributes={
                # Required in practice; null is allowed through so GIT_LOCAL_PATH can fill it.
                "path": string_attribute(
                    f"Path to the root of the local git repository. Falls back to {ENV_PATH} when unset.",
                    optional=True,
                ),
            },
            description="Read-only access to a local git repository",
        )

    def configure(self, config: Mapping[str, Any]) -> ConfigureResponse:
        resp = ConfigureResponse()
        configured_path = config.get("path")

        # A configured value must be known before anything is opened.
        if is_unknown(configured_path):
            resp.diagnostics.add_attribute_error(
                "path",
                "Unknown git path",
                "The provider cannot open the git repository as there is an unknown configuration value for the path. "
                f"Either target apply the source of the value first, set the value statically in the configuration, "
                f"or use the {ENV_PATH} environment variable.",
            )
            return resp

        # Environment is the default; a non-null configuration value overrides it, even when empty.
        git_path = os.environ.get(ENV_PATH, "")
        if not is_null(configured_path):
            git_path = configured_path

        if not git_path:
            resp.diagnostics.add_attribute_error(
                "path",
                "Missing Git Local Path",
                "The provider cannot open the git repository as there is a missing or empty value for the path. "
                f"Set the path value in the configuration or use the {ENV_PATH} environment variable. "
                "If either is already set, ensure the value is not empty.",
            )
            return resp

        try:
            repo = open_repository(git_path)
        except RepositoryOpenError as e:
            resp.diagnostics.add_error(
                "Unable to Open Git Repository",
                "An unexpected error occurred when opening the git repository. "
                "If the error is not clear, please contact the provider developers.\n\n"
                f"Git Error: {e.reason}",
            )
            return resp

        logger.info(f"Configured {PROVIDER_TYPE_NAME} provider for {git_path}")
        resp.data_source_data = repo
        return resp

    def data_sources(self) -> List[Callable[[], DataSource]]:
        return [
            CommitDataSource,
            HeadDataSource,
            RemoteDataSource,
            RemotesDataSource,
        ]

    def resources(self) -> List[Callable[[], Any]]:
        # Read-only provider.
        return []


def new(version: str) -> Callable[[], GitLocalProvider]:
    """Factory handed to the host; one provider instance per session."""
    def factory() -> GitLocalProvider:
        return GitLocalProvider(version=version)
    return factory
