"""Build information of the deployed service"""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, HttpUrl

VERSION_FILE_NAME = "version.json"


class Version(BaseModel):
    """Contents of `version.json`, written by the deployment pipeline."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: HttpUrl
    version: str
    commit: str
    build: str


def fetch_app_version_from_file(root_path: Optional[Path] = None) -> Version:
    """Read `version.json` from `root_path`, the working directory by default.

    A broken version file is a deployment error and is not handled here.

    Raises:
        FileNotFoundError: if there is no version file.
        ValueError: if the file is not JSON or does not match `Version`.
    """
    version_file = (root_path or Path.cwd()) / VERSION_FILE_NAME
    return Version.model_validate(json.loads(version_file.read_text()))
