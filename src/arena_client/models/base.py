"""Shared base class for Are.na response models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ArenaModel(BaseModel):
    """Base for every entity received from the API.

    Models are immutable and keep fields the server sends that are not
    declared here, so a parsed body can be dumped back unchanged with
    `model_dump(by_alias=True, exclude_unset=True)`.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class Metadata(ArenaModel):
    """Free-form metadata attached to users and channels."""

    description: Optional[str] = None
