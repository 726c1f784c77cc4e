from enum import Enum


class LogLevel(Enum):
    DEBUG = 'DEBUG'
    RELEASE = 'RELEASE'


# Tag marking a container whose comment defines a logical module
MODULE_DEFINITION_TAG = 'moduledefinition'

# Tag placing a declaration into a logical module
MODULE_TAG = 'module'

LOG_FILENAME = 'docmodules.log'

# Used when docmodules.json does not set log_level
DEFAULT_LOG_LEVEL = LogLevel.DEBUG

CONFIG_FILENAME = 'docmodules.json'
CONFIG_ENV_VAR = 'DOCMODULES_CONFIG'
