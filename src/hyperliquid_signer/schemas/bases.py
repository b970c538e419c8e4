"""
Base Schema Models

Core Classes:
    - CanonicalModel: Pydantic base model shared by request and signature schemas

Dependencies:
    - pydantic: For data validation and serialization
"""

from pydantic import BaseModel, ConfigDict


class CanonicalModel(BaseModel):
    """
    Pydantic base model for the package's schemas.

    Models accept both field names and their wire aliases, so
    ``TriggerOrderType(triggerPx=...)`` and ``TriggerOrderType(trigger_px=...)``
    build the same value.
    """

    model_config = ConfigDict(populate_by_name=True)
