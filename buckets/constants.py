from typing import Final


APP_NAME: Final[str] = "bucket"
APP_VERSION: Final[str] = "0.1.0"

REPOSITORY_DIRNAME: Final[str] = ".buckets"
REPOSITORY_CONFIG_FILENAME: Final[str] = "config"

BUCKET_DIRNAME: Final[str] = ".b"
BUCKET_CONFIG_FILENAME: Final[str] = "config.yaml"

RULE_RECORD_SUFFIX: Final[str] = ".yaml"
RULE_TEMP_PREFIX: Final[str] = "."
RULE_TEMP_SUFFIX: Final[str] = ".tmp"

BUCKET_DIR_ENVVAR: Final[str] = "BUCKET_DIR"

RESOURCE_KINDS: Final[tuple[str, ...]] = (
    "bucket",
    "input",
    "create",
    "output",
)
