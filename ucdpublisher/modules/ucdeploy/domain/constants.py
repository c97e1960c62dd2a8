"""Constants shared across ucdeploy domain models."""

MAX_VERSION_NAME_LENGTH = 255
PROP_TYPE_TEXT = "TEXT"
VERSION_ID_ENV_SUFFIX = "_VersionId"
DEFAULT_INCLUDE_PATTERN = "**/*"
