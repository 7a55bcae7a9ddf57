"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any

# ${VAR} or ${VAR:default}
_PLACEHOLDER = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}")


def expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variable placeholders.

    Strings may contain ``${VAR}`` or ``${VAR:default}`` placeholders; a
    placeholder whose variable is unset and has no default is left as-is.
    Dictionaries and lists are expanded element-wise, anything else is
    returned unchanged.
    """
    if isinstance(value, str):
        return _PLACEHOLDER.sub(_replace, value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def _replace(match: "re.Match[str]") -> str:
    name, default = match.group(1), match.group(2)
    if name in os.environ:
        return os.environ[name]
    if default is not None:
        return default
    return match.group(0)
