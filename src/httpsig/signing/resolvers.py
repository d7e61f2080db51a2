"""
Key id and secret resolution

The key id and secret are configured as expressions and resolved exactly
once per request by a caller-supplied ``resolver(expression) -> str``.
"""

import os
from string import Template
from typing import Mapping, Optional

from ..exceptions import SigningConfigError
from .types import Resolver


def literal_resolver(expression: str) -> str:
    """Default resolver: the expression is the value"""
    return expression


def create_template_resolver(
    variables: Optional[Mapping[str, str]] = None,
    use_environment: bool = True
) -> Resolver:
    """
    Create a resolver substituting ``${name}`` placeholders.

    Placeholders are looked up in ``variables`` first, then in the process
    environment when ``use_environment`` is set.

    Args:
        variables: Values available to expressions
        use_environment: Whether environment variables are available

    Returns:
        Resolver: Function resolving one expression

    Raises:
        SigningConfigError: When an expression references an unknown name
    """
    def resolve(expression: str) -> str:
        values = dict(os.environ) if use_environment else {}
        if variables:
            values.update(variables)

        try:
            return Template(expression).substitute(values)
        except KeyError as e:
            raise SigningConfigError(
                f"Unknown variable in expression: {e.args[0]}",
                {"variable": e.args[0]}
            )
        except ValueError as e:
            raise SigningConfigError(f"Invalid expression: {e}", {"original_error": str(e)})

    return resolve
