import importlib
import logging
import os

from .api_caller import APICaller
from .exception import TFCExecutorException, UnmanagedObjectTypeException
from .tfc_object import TFCObject
from .tfc_objects import TFCWorkspace
from .util import InflectionStr

logger = logging.getLogger(__name__)


class TFCClient(object):
    """The Terraform Cloud Client
    Initialize the session with the API server and build TFCObject of any
    valid type with `TFCClient.get(<object_type>, id=<object_id>)`.

    Examples:
     - tfc_client.get("workspace", id="ws-12344321")
     - tfc_client.workspace("my-org", "my-workspace").job_inputs()

    :param token: TFC API Token. Default: the TFC_TOKEN environment variable
    :type token: str
    :param url: TFC API URL. Default: the TFC_URL environment variable or "https://app.terraform.io"
    :type url: str
    """

    OBJECTS_MODULE = "tfc_executor.tfc_objects"
    DEFAULT_URL = "https://app.terraform.io"

    def __init__(self, token: str = None, url: str = None):
        token = token or os.environ.get("TFC_TOKEN")
        if not token:
            raise TFCExecutorException("No API token given and TFC_TOKEN is not set")
        self.url = url or os.environ.get("TFC_URL") or TFCClient.DEFAULT_URL
        headers = {
            "Content-Type": "application/vnd.api+json",
            "Authorization": "Bearer {}".format(token),
        }
        self._api = APICaller(host=self.url, base_url="api/v2", headers=headers)
        logger.debug("TFC client ready for %s", self.url)

    def get(self, object_type: str, id: str) -> TFCObject:
        object_type = InflectionStr(object_type).dasherize.pluralize
        return self.factory({"type": object_type, "id": id})

    def workspace(self, organization: str, name: str) -> TFCWorkspace:
        api_response = self._api.get(
            path=f"organizations/{organization}/workspaces/{name}"
        )
        return self.factory(api_response.data)

    def factory(self, data: dict) -> TFCObject:
        if not data or "id" not in data or "type" not in data:
            raise UnmanagedObjectTypeException("No type and/or id in data")
        object_type = InflectionStr(data["type"]).singularize.underscore.camelize
        class_name = "TFC{type}".format(type=object_type)
        module = importlib.import_module(TFCClient.OBJECTS_MODULE)
        tfc_class = getattr(module, class_name, TFCObject)
        return tfc_class(client=self, data=data)
