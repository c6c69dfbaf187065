from typing import Optional

from .data import AttributesModel
from ..enums import VarCat


class VarModel(AttributesModel):
    key: Optional[str] = None
    value: Optional[str] = None
    description: Optional[str] = None
    category: Optional[VarCat] = VarCat.terraform
    hcl: Optional[bool] = False
    sensitive: Optional[bool] = False
