from datetime import datetime
from typing import Optional

from .data import AttributesModel


class WorkspaceModel(AttributesModel):
    name: Optional[str] = None
    created_at: Optional[datetime] = None
    terraform_version: Optional[str] = None
    working_directory: Optional[str] = None
    execution_mode: Optional[str] = None
    locked: Optional[bool] = None
    auto_apply: Optional[bool] = False
