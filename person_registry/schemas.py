from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

SignedInt = Annotated[int, Field(ge=-(2 ** 63), le=2 ** 63 - 1)]


class PersonIn(BaseModel):
    id: str  # chosen by the client, never generated
    # "FullName" is the field name older clients send
    full_name: str = Field("", validation_alias=AliasChoices("full_name", "FullName"))
    age: SignedInt = 0


class PersonOut(BaseModel):
    id: str
    full_name: str
    age: int

    model_config = ConfigDict(from_attributes=True)
