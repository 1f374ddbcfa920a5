"""
Pydantic schemas (FastAPI) for the cryptographic service.

Byte arrays travel base64-encoded.

10-05-2023
"""

from pydantic import BaseModel

from typing import Optional, List


class EVotingSchema(BaseModel):
    """
    Base class for an e-voting schema.
    """

    class Config:
        arbitrary_types_allowed = True


class HealthOut(EVotingSchema):
    status: str
    name: str
    version: str


class CapabilityOut(EVotingSchema):
    id: str
    name: str
    description: str
    num_arguments: int


class ListCapabilitiesOut(EVotingSchema):
    request_id: Optional[str] = None
    ok: bool
    capabilities: List[CapabilityOut]


class ComputeIn(EVotingSchema):
    request_id: str
    capability_id: str
    arguments: List[str] = []


class ComputeOut(EVotingSchema):
    request_id: str
    ok: bool
    result: List[str] = []
    error: Optional[str] = None
