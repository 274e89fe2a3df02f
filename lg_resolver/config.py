"""
Resolver Configuration

Endpoint credentials and client options, loaded from code, environment
variables or a YAML file.
"""

import os
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from lg_resolver.exceptions import InvalidConfigurationError

DEFAULT_TOKEN_PATH = "/sts/v1.0/issueToken"


class LGEndpoint:
    """Credentials and addresses of an LG application"""

    def __init__(
        self,
        endpoint_key: str,
        lg_app_id: str,
        endpoint_uri: str,
        token_uri: Optional[str] = None
    ):
        """
        Args:
            endpoint_key: Subscription key exchanged for bearer tokens
            lg_app_id: LG application id, sent as the request scenario
            endpoint_uri: Base URI of the LG service
            token_uri: Token service URI (defaults to <endpoint_uri>/sts/v1.0/issueToken)

        Raises:
            InvalidConfigurationError: If any required value is empty
        """
        self._validate_inputs(endpoint_key, lg_app_id, endpoint_uri)
        self._endpoint_key = endpoint_key
        self._lg_app_id = lg_app_id
        self._endpoint_uri = endpoint_uri.rstrip('/')
        self._token_uri = token_uri or f"{self._endpoint_uri}{DEFAULT_TOKEN_PATH}"

    @staticmethod
    def _validate_inputs(endpoint_key: str, lg_app_id: str, endpoint_uri: str):
        for name, value in (
            ("endpoint_key", endpoint_key),
            ("lg_app_id", lg_app_id),
            ("endpoint_uri", endpoint_uri),
        ):
            if not value or not str(value).strip():
                raise InvalidConfigurationError(f"{name} must not be empty")

    @property
    def endpoint_key(self) -> str:
        return self._endpoint_key

    @property
    def lg_app_id(self) -> str:
        return self._lg_app_id

    @property
    def endpoint_uri(self) -> str:
        return self._endpoint_uri

    @property
    def token_uri(self) -> str:
        return self._token_uri

    def __repr__(self) -> str:
        return f"LGEndpoint(lg_app_id={self._lg_app_id!r}, endpoint_uri={self._endpoint_uri!r})"

    @classmethod
    def from_env(cls) -> "LGEndpoint":
        """Build an endpoint from LG_ENDPOINT_KEY, LG_APP_ID, LG_ENDPOINT_URI and LG_TOKEN_URI"""
        return cls(
            endpoint_key=os.getenv("LG_ENDPOINT_KEY", ""),
            lg_app_id=os.getenv("LG_APP_ID", ""),
            endpoint_uri=os.getenv("LG_ENDPOINT_URI", ""),
            token_uri=os.getenv("LG_TOKEN_URI") or None
        )


@dataclass
class LGOptions:
    """Client options"""
    locale: Optional[str] = None  # used when the activity has no locale
    timeout: float = 30.0  # seconds, per HTTP call
    log_dir: Optional[Path] = None  # per-call JSONL logs are written here when set

    @classmethod
    def from_env(cls) -> "LGOptions":
        log_dir = os.getenv("LG_LOG_DIR")
        return cls(
            locale=os.getenv("LG_LOCALE") or None,
            timeout=float(os.getenv("LG_TIMEOUT", "30.0")),
            log_dir=Path(log_dir) if log_dir else None
        )


def load_config(config_path: Path) -> Tuple[LGEndpoint, LGOptions]:
    """
    Load endpoint and options from the "lg" section of a YAML file

    Example:
        lg:
          endpoint_key: "..."
          app_id: "my-lg-app"
          endpoint_uri: "https://westus.api.cognitive.microsoft.com/lg"
          locale: "en-US"
          timeout: 10

    Raises:
        InvalidConfigurationError: If the file is missing, unparsable or incomplete
    """
    try:
        with open(config_path) as f:
            config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise InvalidConfigurationError(f"Config file not found: {config_path}")
    except yaml.YAMLError as e:
        raise InvalidConfigurationError(f"Invalid YAML in {config_path}: {e}")

    section = config.get('lg') if isinstance(config, dict) else None
    if not isinstance(section, dict):
        raise InvalidConfigurationError(f"Missing 'lg' section in {config_path}")

    endpoint = LGEndpoint(
        endpoint_key=section.get('endpoint_key', ''),
        lg_app_id=section.get('app_id', ''),
        endpoint_uri=section.get('endpoint_uri', ''),
        token_uri=section.get('token_uri')
    )

    log_dir = section.get('log_dir')
    options = LGOptions(
        locale=section.get('locale'),
        timeout=float(section.get('timeout', 30.0)),
        log_dir=Path(log_dir) if log_dir else None
    )

    return endpoint, options
