"""Configuration for iconfinder"""

import pathlib

from dynaconf import Dynaconf, Validator

# Validators for iconfinder settings.
_validators = [
    Validator("deployment.canary", is_type_of=bool),
    Validator("logging.format", is_in=["mozlog", "pretty"]),
    Validator("logging.level", is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    Validator("logging.can_propagate", is_type_of=bool),
    Validator("metrics.dev_logger", is_type_of=bool),
    Validator("metrics.host", is_type_of=str),
    Validator("metrics.port", gte=0, is_type_of=int),
    Validator("http.user_agent", "http.accept", is_type_of=str, must_exist=True),
    Validator("http.max_connections", is_type_of=int, gte=1),
    # Upstream sites are arbitrary, so never wait on them for more than a minute.
    Validator(
        "http.connect_timeout_sec",
        "http.request_timeout_sec",
        "http.pool_timeout_sec",
        is_type_of=float,
        gt=0,
        lte=60.0,
    ),
    Validator("icons.target_size", is_type_of=int, gte=0, must_exist=True),
    Validator("icons.default_size", is_type_of=int, gte=0, must_exist=True),
    Validator("icons.og_image_width", "icons.og_image_height", is_type_of=int, gte=0),
    Validator("sentry.env", is_in=["prod", "stage", "dev"]),
    Validator("sentry.mode", is_in=["disabled", "release", "debug"]),
    Validator("sentry.traces_sample_rate", gte=0, lte=1),
]

# `root_path` = The directory holding `configs/`, resolved from this module.
# `envvar_prefix` = Export envvars with `export ICONFINDER_FOO=bar`.
# `settings_files` = Load these files in the order.
# `environments` = Enable layered environments such as `development`, `production`, `testing` etc.
# `env_switcher` = Switch environments by `export ICONFINDER_ENV=production`.
#                  Default: `development`.
# `validators` = Define validators for iconfinder settings.

settings = Dynaconf(
    root_path=str(pathlib.Path(__file__).parent),
    envvar_prefix="ICONFINDER",
    settings_files=[
        "configs/default.toml",
        "configs/development.toml",
        "configs/production.toml",
        "configs/ci.toml",
        "configs/testing.toml",
    ],
    environments=True,
    env_switcher="ICONFINDER_ENV",
    validators=_validators,
)
