"""Build metadata reported by the applications."""

APP_NAME = "unknown"
APP_VERSION = "unknown"
COMMIT_HASH = "unknown"
RUNTIME_VERSION = "unknown"
BUILD_TIME = "unknown"