from typing import Optional

from pydantic import BaseModel, ConfigDict

from .enums import VarCat
from .exception import TFCObjectException
from .models.var import VarModel


class TerraformVariable(BaseModel):
    """A Terraform input variable handed to a job execution

    The record carries exactly what the renderers need: the variable name, its
    value as text, and whether that text is an HCL expression (list, map,
    object, ...) instead of a plain string literal. Nothing is parsed or
    escaped here, and every field can be replaced after construction.

    For example:
    - `TerraformVariable("region", "us-east-1")`
    - `TerraformVariable("tags", '{ env = "prod" }', hcl=True)`

    :param key: Name of the variable
    :type key: str
    :param value: Value of the variable, the empty string is allowed
    :type value: str
    :param hcl: Parse the value as an HCL expression. Default: False
    :type hcl: bool
    """

    # Strict: no coercion on construction, assignments are not validated
    model_config = ConfigDict(strict=True)

    key: str
    value: str
    hcl: bool = False

    def __init__(self, key: str, value: str, hcl: bool = False):
        super().__init__(key=key, value=value, hcl=hcl)

    def __str__(self) -> str:
        return self.key

    @classmethod
    def from_var_model(cls, model: VarModel) -> "TerraformVariable":
        if model.value is None:
            raise TFCObjectException(
                f"Variable '{model.key}' has no readable value (sensitive: {model.sensitive})"
            )
        return cls(model.key, model.value, bool(model.hcl))

    def to_var_model(
        self,
        category: VarCat = VarCat.terraform,
        sensitive: bool = False,
        description: Optional[str] = None,
    ) -> VarModel:
        attributes = dict(
            key=self.key,
            value=self.value,
            category=category,
            hcl=self.hcl,
            sensitive=sensitive,
        )
        if description is not None:
            attributes["description"] = description
        return VarModel(**attributes)
