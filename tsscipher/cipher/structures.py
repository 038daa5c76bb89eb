from binascii import unhexlify

import pydantic

from tsscipher.cipher import const


class BaseData(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True, populate_by_name=True, extra='forbid')

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class KeyPair(BaseData):
    private_key: str = pydantic.Field(alias=const.PRIVATE_KEY_FIELD)
    public_key: str = pydantic.Field(alias=const.PUBLIC_KEY_FIELD)

    @pydantic.field_validator('private_key', 'public_key')
    @classmethod
    def check_hex(cls, value: str) -> str:
        if not value:
            raise ValueError('key must not be empty')
        unhexlify(value)
        return value

    @classmethod
    def from_json(cls, data: str) -> 'KeyPair':
        return cls.model_validate_json(data)
