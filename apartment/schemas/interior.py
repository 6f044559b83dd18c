from pydantic import Field

from apartment.schemas.base import CamelModel, SuccessOut


class InteriorTypeCreate(CamelModel):
    code: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=100)


class InteriorTypeUpdate(CamelModel):
    code: str | None = Field(default=None, min_length=1, max_length=50)
    name: str | None = Field(default=None, min_length=1, max_length=100)


class InteriorTypeOut(CamelModel):
    id: int
    code: str
    name: str


class InteriorPatternCreate(CamelModel):
    type_id: int
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None


class InteriorPatternUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = None


class InteriorPatternOut(CamelModel):
    id: int
    type_id: int
    pattern_number: int
    name: str
    description: str | None = None


class InteriorTypeListOut(CamelModel):
    types: list[InteriorTypeOut] = []


class InteriorPatternListOut(CamelModel):
    patterns: list[InteriorPatternOut] = []


class InteriorCombinationOut(CamelModel):
    type: InteriorTypeOut
    patterns: list[InteriorPatternOut] = []


class InteriorCombinationListOut(CamelModel):
    combinations: list[InteriorCombinationOut] = []


class InteriorTypeResult(SuccessOut):
    type: InteriorTypeOut


class InteriorPatternResult(SuccessOut):
    pattern: InteriorPatternOut
