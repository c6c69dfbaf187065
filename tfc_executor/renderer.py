"""Encode variables for a Terraform invocation

Three encodings are supported, matching the ways the Terraform CLI accepts
input variables:
- `-var key=value` command-line flags
- `TF_VAR_<key>` environment variables
- a generated `.tfvars` file
"""
from collections import OrderedDict
import logging
import re
from typing import Dict, Iterable, List, Mapping

from .exception import InvalidVariableKeyException
from .variable import TerraformVariable

logger = logging.getLogger(__name__)

ENV_PREFIX = "TF_VAR_"

_VALID_KEY = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")

_HCL_ESCAPES = [
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
    ("${", "$${"),
    ("%{", "%%{"),
]


def _check_key(variable: TerraformVariable) -> str:
    if not isinstance(variable.key, str) or not _VALID_KEY.fullmatch(variable.key):
        raise InvalidVariableKeyException(
            f"'{variable.key}' is not a valid Terraform variable name"
        )
    return variable.key


def _unique(variables: Iterable[TerraformVariable]) -> List[TerraformVariable]:
    by_key: Dict[str, TerraformVariable] = OrderedDict()
    for variable in variables:
        key = _check_key(variable)
        if key in by_key:
            logger.debug("Variable '%s' defined twice, keeping the last one", key)
            del by_key[key]
        by_key[key] = variable
    return list(by_key.values())


def quote_string(value: str) -> str:
    """Return `value` as a quoted HCL string literal"""
    for raw, escaped in _HCL_ESCAPES:
        value = value.replace(raw, escaped)
    return f'"{value}"'


def cli_args(variables: Iterable[TerraformVariable]) -> List[str]:
    args = list()
    for variable in _unique(variables):
        args.extend(["-var", f"{variable.key}={variable.value}"])
    return args


def environment(
    variables: Iterable[TerraformVariable], base: Mapping[str, str] = None
) -> Dict[str, str]:
    env = dict(base) if base else dict()
    for variable in _unique(variables):
        env[f"{ENV_PREFIX}{variable.key}"] = variable.value
    return env


def tfvars(variables: Iterable[TerraformVariable]) -> str:
    lines = list()
    for variable in _unique(variables):
        if variable.hcl:
            expression = variable.value
        else:
            expression = quote_string(variable.value)
        lines.append(f"{variable.key} = {expression}")
    return "\n".join(lines) + "\n" if lines else ""


def write_tfvars(path, variables: Iterable[TerraformVariable]) -> str:
    content = tfvars(variables)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(content)
    logger.debug("Wrote %d bytes of variables to %s", len(content), path)
    return content
