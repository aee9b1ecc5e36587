"""Built-in defaults for the error collector.

The message replacements match the text monitoring backends display for
redacted errors.
"""

DEFAULT_ENABLED = True
DEFAULT_HIGH_SECURITY = False
DEFAULT_ALLOW_RAW_EXCEPTION_MESSAGES = True
DEFAULT_MAX_ERRORS = 20

HIGH_SECURITY_ERROR_MESSAGE = "message removed by high security setting"
SECURITY_POLICY_ERROR_MESSAGE = "message removed by security policy"

CONFIG_SECTION = "error_collector"
