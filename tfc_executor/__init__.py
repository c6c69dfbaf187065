__version__ = "0.1.0"

from .variable import TerraformVariable
from .job_inputs import JobInputs
from .tfc_client import TFCClient
