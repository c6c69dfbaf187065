from typing import Optional

from pydantic import SerializeAsAny

from . import KebabCaseBaseModel


class AttributesModel(KebabCaseBaseModel):
    pass


class DataModel(KebabCaseBaseModel):
    id: Optional[str] = None
    type: str
    attributes: Optional[SerializeAsAny[AttributesModel]] = None


class RootModel(KebabCaseBaseModel):
    data: DataModel
