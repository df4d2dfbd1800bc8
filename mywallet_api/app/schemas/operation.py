"""
Pydantic schemas for wallet operations.

An operation is a single income (``entrada``) or expense (``saida``)
entry.  The ``date`` is stamped by the server as ``DD/MM`` and the
owner is taken from the session, so neither is part of the request
payload.
"""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

OperationType = Literal["entrada", "saida"]


class OperationCreate(BaseModel):
    """Schema for creating an operation."""

    value: float = Field(..., allow_inf_nan=False, examples=[49.9])
    description: str = Field(..., min_length=1, examples=["Mercado"])
    type: OperationType = Field(..., examples=["saida"])


class OperationRead(BaseModel):
    """Schema for reading an operation.

    Serialized with the public field names ``_id`` and ``idUser``.  Whole
    numbers are listed back as integers.
    """

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int = Field(..., alias="_id")
    value: Union[int, float]
    description: str
    type: OperationType
    date: str
    id_user: int = Field(..., alias="idUser")
