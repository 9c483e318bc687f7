"""
Utilities for expanding environment variables in configured paths.
"""
import os
import re
from typing import Dict, Optional

# ${VAR} or ${VAR:-default}
_VARIABLE = re.compile(r'\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}')


class PathInterpolator:
    """
    Expands ${VAR} and ${VAR:-default} references and a leading ``~`` in
    paths read from configuration files.
    """
    def __init__(self, context: Optional[Dict[str, str]] = None):
        """
        :param context: Variables available for expansion. Defaults to the process environment.
        """
        self.context = dict(os.environ) if context is None else context

    def expand(self, template: str) -> str:
        """
        Expands a path template.

        :param template: The path, possibly holding ${VAR} placeholders.
        :return: The expanded path.
        :raises KeyError: If a variable is unset and has no default.
        """
        def replace(match):
            name, default = match.group(1), match.group(2)
            value = self.context.get(name)
            if default is not None:
                return value if value else default
            if value is None:
                raise KeyError(f"Variable {name} not found in context")
            return value

        expanded = _VARIABLE.sub(replace, template)
        if expanded == '~' or expanded.startswith('~/'):
            home = self.context.get('HOME') or os.path.expanduser('~')
            expanded = home + expanded[1:]
        return expanded
