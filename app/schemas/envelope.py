from typing import Generic, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Standard success wrapper"""
    success: bool = True
    data: T


class MessageResponse(DataResponse[T], Generic[T]):
    """Success wrapper for mutations, with a message the UI can show"""
    message: str


class ListResponse(BaseModel, Generic[T]):
    success: bool = True
    count: int
    data: list[T]
