from collections.abc import Mapping
import importlib
from typing import Any, Dict, Optional, TYPE_CHECKING

from .util import InflectionStr

if TYPE_CHECKING:
    from .tfc_client import TFCClient


class TFCObject(object):
    """Represent a TFC object (workspace, variable, ...) read from the API

    Attributes are loaded lazily: an object built from a bare `{"type", "id"}`
    reference fetches its data on first attribute access. When a model named
    after the type exists in `tfc_executor.models` (`vars` -> `VarModel`), the
    attributes are parsed with it, so `my_var.hcl` is a bool and
    `my_workspace.created_at` a datetime.

    :param client: The TFC Client instance
    :type client: TFCClient
    :param data: Content of the "data" object in an API response
    :type data: dict
    """

    MODELS_MODULE = "tfc_executor.models"

    def __init__(self, client: "TFCClient", data: Mapping):
        self.client = client
        self.id = data["id"]
        self.type = data["type"]
        self.attrs: Dict[str, Any] = dict()
        self._model = None
        self._init_from_data(data)

    def _init_from_data(self, data: Mapping):
        if "attributes" in data:
            self.attrs["attributes"] = data["attributes"]
            model_class_name = "{}Model".format(
                InflectionStr(self.type).underscore.singularize.camelize
            )
            module = importlib.import_module(TFCObject.MODELS_MODULE)
            model_class = getattr(module, model_class_name, None)
            if model_class:
                self._model = model_class(**data["attributes"])

        if "relationships" in data:
            self.attrs["relationships"] = data["relationships"]

        if "links" in data:
            self.attrs["links"] = data["links"]

    @property
    def path(self) -> str:
        return f"{self.type}/{self.id}"

    def _load(self):
        links = self.attrs.get("links") or {}
        path = links.get("self") or self.path
        api_response = self.client._api.get(path=path)
        self._init_from_data(api_response.data)

    def refresh(self):
        self.attrs = dict()
        self._model = None

    @property
    def attributes(self) -> Mapping:
        if "attributes" not in self.attrs:
            self._load()
        return self.attrs.get("attributes", {})

    @property
    def model(self):
        if self._model is None and "attributes" not in self.attrs:
            self._load()
        return self._model

    @property
    def relationships(self) -> Optional[Mapping]:
        return self.attrs.get("relationships")

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.type}/{self.id}>"

    def __getattr__(self, key):
        # Only reached for names not defined on the instance or the class
        if key.startswith("_") or key in ("client", "attrs", "id", "type"):
            raise AttributeError(key)
        key_dash = InflectionStr(key).dasherize
        model = self.model
        if model is not None and key in type(model).model_fields:
            return getattr(model, key)
        elif key_dash in self.attributes:
            return self.attributes[key_dash]
        else:
            raise AttributeError(key)
