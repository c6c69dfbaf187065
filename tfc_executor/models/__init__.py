import inflection
from pydantic import BaseModel, ConfigDict


class KebabCaseBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=inflection.dasherize, populate_by_name=True
    )

    def __init__(self, **kwargs):
        dashed_kwargs = {
            inflection.dasherize(key): value for key, value in kwargs.items()
        }
        super().__init__(**dashed_kwargs)

    def json(self, *, by_alias=True, exclude_unset=True, **kwargs):
        # Terraform Cloud rejects null for attributes the caller did not set
        return self.model_dump_json(
            by_alias=by_alias, exclude_unset=exclude_unset, **kwargs
        )

    def dict(self, *, by_alias=True, exclude_unset=True, **kwargs):
        return self.model_dump(
            by_alias=by_alias, exclude_unset=exclude_unset, **kwargs
        )


from .data import AttributesModel, DataModel, RootModel
from .var import VarModel
from .workspace import WorkspaceModel
