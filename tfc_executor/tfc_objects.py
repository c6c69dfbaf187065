import logging
from typing import Generator, Optional

from .enums import VarCat
from .exception import TFCObjectException
from .job_inputs import JobInputs
from .models.data import DataModel, RootModel
from .models.var import VarModel
from .tfc_object import TFCObject
from .variable import TerraformVariable

logger = logging.getLogger(__name__)


class TFCVar(TFCObject):
    type = "vars"

    @property
    def workspace_id(self) -> Optional[str]:
        try:
            return self.relationships["configurable"]["data"]["id"]
        except (KeyError, TypeError):
            return None

    @property
    def path(self) -> str:
        if self.workspace_id:
            return f"workspaces/{self.workspace_id}/vars/{self.id}"
        return f"vars/{self.id}"

    def to_variable(self) -> TerraformVariable:
        return TerraformVariable.from_var_model(self.model)

    def modify(self, **kwargs) -> "TFCVar":
        model = VarModel(**kwargs)
        payload = RootModel(data=DataModel(id=self.id, type=self.type, attributes=model))
        api_response = self.client._api.patch(path=self.path, data=payload.json())
        self.refresh()
        if api_response is not True:
            self._init_from_data(api_response.data)
        return self


class TFCWorkspace(TFCObject):
    type = "workspaces"

    @property
    def vars(self) -> Generator[TFCVar, None, None]:
        for api_response in self.client._api.get_list(path=f"{self.path}/vars"):
            for data in api_response.data:
                yield self.client.factory(data)

    def create_var(
        self,
        variable: TerraformVariable,
        category: VarCat = VarCat.terraform,
        sensitive: bool = False,
        description: Optional[str] = None,
    ) -> TFCVar:
        model = variable.to_var_model(
            category=category, sensitive=sensitive, description=description
        )
        payload = RootModel(data=DataModel(type="vars", attributes=model))
        api_response = self.client._api.post(
            path=f"{self.path}/vars", data=payload.json()
        )
        logger.info("Created %s variable '%s' on %s", category, variable.key, self.id)
        return self.client.factory(api_response.data)

    def delete_var(self, var: TFCVar):
        logger.info("Deleting variable %s from %s", var.id, self.id)
        return self.client._api.delete(path=f"{self.path}/vars/{var.id}")

    def job_inputs(self) -> JobInputs:
        inputs = JobInputs()
        for var in self.vars:
            try:
                variable = var.to_variable()
            except TFCObjectException as e:
                logger.warning("Skipping variable %s of %s: %s", var.id, self.id, e)
                continue
            if var.category == VarCat.env:
                inputs.environment[variable.key] = variable.value
            else:
                inputs.add(variable)
        logger.debug("Workspace %s: %s", self.id, inputs)
        return inputs
