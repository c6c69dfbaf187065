import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from . import renderer
from .variable import TerraformVariable

logger = logging.getLogger(__name__)


class JobInputs(object):
    """The set of inputs assembled for one Terraform execution

    Holds the Terraform variables (one per key, the last added wins) and the
    plain environment variables of the Terraform process. Once assembled, the
    set is rendered with `to_cli_args`, `to_environment` or `to_tfvars`.

    :param variables: Initial variables
    :type variables: Iterable[TerraformVariable]
    :param environment: Initial environment variables
    :type environment: Mapping[str, str]
    """

    def __init__(
        self,
        variables: Iterable[TerraformVariable] = None,
        environment: Mapping[str, str] = None,
    ):
        self._variables: Dict[str, TerraformVariable] = dict()
        self.environment: Dict[str, str] = dict(environment) if environment else dict()
        for variable in variables or []:
            self.add(variable)

    def add(self, variable: TerraformVariable) -> TerraformVariable:
        if variable.key in self._variables:
            logger.debug("Replacing variable '%s'", variable.key)
            del self._variables[variable.key]
        self._variables[variable.key] = variable
        return variable

    def set(self, key: str, value: str, hcl: bool = False) -> TerraformVariable:
        return self.add(TerraformVariable(key, value, hcl))

    def get(
        self, key: str, default: TerraformVariable = None
    ) -> Optional[TerraformVariable]:
        return self._variables.get(key, default)

    def remove(self, key: str) -> TerraformVariable:
        return self._variables.pop(key)

    def update(self, other: "JobInputs") -> "JobInputs":
        for variable in other:
            self.add(variable)
        self.environment.update(other.environment)
        return self

    @property
    def variables(self) -> List[TerraformVariable]:
        return list(self._variables.values())

    def to_cli_args(self) -> List[str]:
        return renderer.cli_args(self.variables)

    def to_environment(self) -> Dict[str, str]:
        return renderer.environment(self.variables, base=self.environment)

    def to_tfvars(self) -> str:
        return renderer.tfvars(self.variables)

    def write_tfvars(self, path) -> str:
        return renderer.write_tfvars(path, self.variables)

    def __getitem__(self, key: str) -> TerraformVariable:
        return self._variables[key]

    def __contains__(self, key) -> bool:
        return key in self._variables

    def __iter__(self) -> Iterator[TerraformVariable]:
        return iter(self.variables)

    def __len__(self) -> int:
        return len(self._variables)

    def __str__(self) -> str:
        return f"JobInputs with {len(self)} variables and {len(self.environment)} environment variables"
